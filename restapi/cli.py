import json
import os
import threading

import pydantic
import typer

from .client import WebClient
from .errors import InvalidBaseUrlError, ServiceError
from .httptypes import JsonDict
from .reachability import DEFAULT_HOSTNAME, Reachability
from .schemas import User
from .services import FriendsService
from .transport import RequestsTransport

BASE_URL_ENV_VAR = "RESTAPI_BASE_URL"
REACHABILITY_HOST_ENV_VAR = "RESTAPI_REACHABILITY_HOST"
TIMEOUT_ENV_VAR = "RESTAPI_TIMEOUT"

DEFAULT_TIMEOUT = 30.0
# requests applies the timeout to connect and to each read separately
WAIT_GRACE_SECONDS = 5.0

app = typer.Typer()


@app.callback()
def main() -> None:
    """Query the REST backend."""


def get_timeout() -> float:
    timeout = os.environ.get(TIMEOUT_ENV_VAR)
    return float(timeout) if timeout else DEFAULT_TIMEOUT


def get_service() -> FriendsService:
    client = WebClient(
        base_url=os.environ.get(BASE_URL_ENV_VAR, FriendsService.base_url),
        transport=RequestsTransport(timeout=get_timeout()),
        reachability=Reachability(
            os.environ.get(REACHABILITY_HOST_ENV_VAR, DEFAULT_HOSTNAME),
        ).is_connected,
    )
    return FriendsService(client)


def echo_response(data: list[JsonDict]) -> None:
    typer.echo(json.dumps(data, indent=4))


@app.command()
def friends(user_id: str) -> None:
    try:
        user = User(id=user_id)
        service = get_service()
    except (InvalidBaseUrlError, pydantic.ValidationError) as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=2) from error

    done = threading.Event()
    results: list[tuple[list[User] | None, ServiceError | None]] = []

    def on_complete(users: list[User] | None, error: ServiceError | None) -> None:
        results.append((users, error))
        done.set()

    service.load_friends(user, on_complete)

    if not done.wait(timeout=get_timeout() + WAIT_GRACE_SECONDS):
        typer.echo("Timed out waiting for a response", err=True)
        raise typer.Exit(code=1)

    users, error = results[0]
    if error is not None:
        typer.echo(error.description, err=True)
        raise typer.Exit(code=1)

    echo_response([user.to_json() for user in users or []])


if __name__ == "__main__":
    app()
