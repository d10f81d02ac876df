from collections.abc import Generator

import pytest
import pytest_httpserver

from restapi import FriendsService, WebClient
from restapi.transport import RequestsTransport
from tests.helpers import FakeTransport

BASE_PATH = "/api/v1"


def _always_connected() -> bool:
    return True


def _never_connected() -> bool:
    return False


@pytest.fixture(name="transport")
def transport_fixture() -> Generator[RequestsTransport, None, None]:
    transport = RequestsTransport(timeout=5)
    yield transport
    transport.close()


@pytest.fixture(name="base_url")
def base_url_fixture(httpserver: pytest_httpserver.HTTPServer) -> str:
    return httpserver.url_for(BASE_PATH)


@pytest.fixture(name="web_client")
def web_client_fixture(base_url: str, transport: RequestsTransport) -> WebClient:
    return WebClient(
        base_url=base_url,
        transport=transport,
        reachability=_always_connected,
    )


@pytest.fixture(name="fake_transport")
def fake_transport_fixture() -> FakeTransport:
    return FakeTransport()


@pytest.fixture(name="offline_client")
def offline_client_fixture(fake_transport: FakeTransport) -> WebClient:
    return WebClient(
        base_url="https://example.com/api/v1",
        transport=fake_transport,
        reachability=_never_connected,
    )


@pytest.fixture(name="friends_service")
def friends_service_fixture(web_client: WebClient) -> FriendsService:
    return FriendsService(web_client)
