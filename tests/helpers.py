import operator
from collections.abc import Callable, Generator
from concurrent.futures import Future
from contextlib import AbstractContextManager, contextmanager
from typing import Any, NamedTuple, TypeVar

import pytest

from restapi.errors import ServiceError
from restapi.httptypes import JsonValue
from restapi.requests_factory import RequestDescriptor
from restapi.transport import TransportCallback, TransportResult

E = TypeVar("E", bound=BaseException)


TestFunction = Callable[..., None]


class BaseTestCase(NamedTuple):
    name: str


def cases(
    name_position: int,
    *cases: NamedTuple,
) -> Callable[[TestFunction], TestFunction]:
    def wrapper(test_function: TestFunction) -> TestFunction:
        return pytest.mark.parametrize(
            argnames="case",
            argvalues=list(cases),
            ids=operator.itemgetter(name_position),
        )(test_function)

    return wrapper


@contextmanager
def _noop_context_manager() -> Generator[None, None, None]:
    yield


def raises(
    error: type[E] | None,
) -> AbstractContextManager[Any]:
    if error is None:
        return _noop_context_manager()

    return pytest.raises(error)


class FakeTransport:
    """Completes every request synchronously with a canned result."""

    def __init__(self, result: TransportResult | None = None) -> None:
        self.result = result or TransportResult(content=b"{}", status_code=200)
        self.requests: list[RequestDescriptor] = []

    def dispatch(
        self,
        request: RequestDescriptor,
        on_complete: TransportCallback,
    ) -> Future[None]:
        self.requests.append(request)
        on_complete(self.result)
        future: Future[None] = Future()
        future.set_result(None)
        return future


class Recorder:
    """Completion callback that remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, ServiceError | None]] = []

    def __call__(self, result: object, error: ServiceError | None) -> None:
        self.calls.append((result, error))

    @property
    def result(self) -> JsonValue:
        [(result, _error)] = self.calls
        return result

    @property
    def error(self) -> ServiceError | None:
        [(_result, error)] = self.calls
        return error
