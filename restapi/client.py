import json
import logging
from collections.abc import Callable
from functools import partial
from http import HTTPStatus

from .errors import (
    NoConnectivityError,
    ServiceError,
    TransportFailureError,
    service_error_from_json,
)
from .httptypes import JsonDict, JsonValue
from .logs import request_repr
from .reachability import Reachability
from .requests_factory import (
    RequestDescriptor,
    RequestMethod,
    build_request,
    parse_base_url,
)
from .transport import Cancellable, RequestsTransport, Transport, TransportResult

logger = logging.getLogger(__name__)

Completion = Callable[[JsonValue, ServiceError | None], None]
ConnectivityCheck = Callable[[], bool]
RequestInterceptor = Callable[[RequestDescriptor], RequestDescriptor]


class WebClient:
    """Sends JSON requests to one backend and reports typed outcomes.

    The client knows nothing about the data models: it turns a path, method
    and parameter bag into a request and hands back the decoded JSON payload
    or a ``ServiceError`` through ``on_complete``.
    """

    def __init__(
        self,
        base_url: str,
        transport: Transport | None = None,
        reachability: ConnectivityCheck | None = None,
        interceptor: RequestInterceptor | None = None,
    ) -> None:
        parse_base_url(base_url)
        self._base_url = base_url
        self._transport = transport if transport is not None else RequestsTransport()
        self._is_connected = (
            reachability if reachability is not None else Reachability().is_connected
        )
        self._interceptor = interceptor

    @property
    def base_url(self) -> str:
        return self._base_url

    def load(
        self,
        path: str,
        method: RequestMethod,
        params: JsonDict,
        on_complete: Completion,
    ) -> Cancellable | None:
        if not self._is_connected():
            logger.warning("No internet connection, skipping %s %s", method, path)
            on_complete(None, NoConnectivityError())
            return None

        request = build_request(
            base_url=self._base_url,
            path=path,
            method=method,
            params=params,
        )

        if self._interceptor is not None:
            request = self._interceptor(request)

        logger.info(
            "Requesting: %s",
            request_repr(
                method=request.method,
                url=request.url,
                headers=request.headers,
                body=request.body,
            ),
        )
        return self._transport.dispatch(
            request,
            partial(self._complete, request, on_complete),
        )

    @staticmethod
    def _complete(
        request: RequestDescriptor,
        on_complete: Completion,
        result: TransportResult,
    ) -> None:
        if result.error is not None:
            logger.warning(
                "Transport failed for %s %s: %s",
                request.method,
                request.url,
                result.error,
            )
            on_complete(None, TransportFailureError(result.error))
            return

        logger.info("Responded: HTTP %s %s", result.status_code, result.content)
        payload = decode_json(result.content)

        if result.status_code is not None and is_success(result.status_code):
            on_complete(payload, None)
            return

        on_complete(None, service_error_from_json(payload, result.status_code))


def is_success(status_code: int) -> bool:
    return HTTPStatus.OK <= status_code < HTTPStatus.MULTIPLE_CHOICES


def decode_json(content: bytes | None) -> JsonValue:
    if not content:
        return None

    try:
        return json.loads(content)
    except (ValueError, RecursionError):
        return None
