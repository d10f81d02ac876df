import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Protocol

import requests

from .requests_factory import RequestDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResult:
    content: bytes | None = None
    status_code: int | None = None
    error: Exception | None = None


TransportCallback = Callable[[TransportResult], None]


class Cancellable(Protocol):
    def cancel(self) -> bool: ...


class Transport(Protocol):
    def dispatch(
        self,
        request: RequestDescriptor,
        on_complete: TransportCallback,
    ) -> Cancellable: ...


class RequestsTransport:
    """Sends requests with ``requests`` on a worker thread.

    ``on_complete`` runs on the worker thread. The returned future can only be
    cancelled while the request is still queued.
    """

    def __init__(
        self,
        timeout: float | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.timeout = timeout
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="restapi-transport",
        )

    def dispatch(
        self,
        request: RequestDescriptor,
        on_complete: TransportCallback,
    ) -> Future[None]:
        future = self._executor.submit(self._send, request, on_complete)
        future.add_done_callback(_log_failure)
        return future

    def close(self, wait: bool = False) -> None:  # noqa: FBT001 FBT002
        self._executor.shutdown(wait=wait)

    def _send(
        self,
        request: RequestDescriptor,
        on_complete: TransportCallback,
    ) -> None:
        with requests.Session() as session:
            try:
                prepared_request = request.prepare()
                response = session.send(prepared_request, timeout=self.timeout)
            except requests.RequestException as error:
                logger.warning("%s %s failed: %s", request.method, request.url, error)
                on_complete(TransportResult(error=error))
                return

        on_complete(
            TransportResult(
                content=response.content,
                status_code=response.status_code,
            ),
        )


def _log_failure(future: Future[None]) -> None:
    if future.cancelled():
        return

    error = future.exception()
    if error is not None:
        logger.error("Request completion failed", exc_info=error)
