import logging
from collections.abc import Callable
from typing import ClassVar

from .client import WebClient
from .errors import ServiceError
from .httptypes import JsonDict, JsonValue
from .requests_factory import RequestMethod
from .schemas import User
from .transport import Cancellable

logger = logging.getLogger(__name__)

FriendsCompletion = Callable[[list[User] | None, ServiceError | None], None]


class FriendsService:
    base_url: ClassVar[str] = "https://your_server_host/api/v1"
    path: ClassVar[str] = "/friends"

    def __init__(self, client: WebClient | None = None) -> None:
        self._client = client if client is not None else WebClient(self.base_url)

    def load_friends(
        self,
        user: User,
        on_complete: FriendsCompletion,
    ) -> Cancellable | None:
        params: JsonDict = {"user_id": user.id}

        def on_loaded(result: JsonValue, error: ServiceError | None) -> None:
            if error is not None:
                on_complete(None, error)
                return

            match result:
                case list():
                    on_complete(parse_users(result), None)
                case _:
                    on_complete(None, None)

        return self._client.load(
            path=self.path,
            method=RequestMethod.GET,
            params=params,
            on_complete=on_loaded,
        )


def parse_users(items: list[JsonValue]) -> list[User]:
    users = [user for item in items if (user := User.from_json(item)) is not None]
    dropped = len(items) - len(users)

    if dropped:
        logger.warning("Dropped %s malformed user records", dropped)

    return users
