import dataclasses
import json
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import SplitResult, urlencode, urlsplit, urlunsplit

import requests

from .errors import InvalidBaseUrlError
from .httptypes import Headers, JsonDict, QueryItems


class RequestMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


QUERY_METHODS = frozenset({RequestMethod.GET, RequestMethod.DELETE})

JSON_HEADERS: Headers = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


@dataclass(frozen=True)
class RequestDescriptor:
    method: RequestMethod
    url: str
    headers: Headers
    query_items: QueryItems = ()
    body: bytes | None = None

    def with_header(self, name: str, value: str) -> "RequestDescriptor":
        return dataclasses.replace(self, headers={**self.headers, name: value})

    def prepare(self) -> requests.PreparedRequest:
        return requests.Request(
            method=self.method.value,
            url=self.url,
            headers=self.headers,
            data=self.body,
        ).prepare()


def parse_base_url(base_url: str) -> SplitResult:
    try:
        components = urlsplit(base_url)
        # raises ValueError for a non-numeric or out of range port
        components.port  # noqa: B018
    except ValueError as error:
        raise InvalidBaseUrlError(base_url) from error

    if components.scheme not in {"http", "https"} or not components.hostname:
        raise InvalidBaseUrlError(base_url)

    return components


def build_request(
    base_url: str,
    path: str,
    method: RequestMethod,
    params: JsonDict,
) -> RequestDescriptor:
    components = parse_base_url(base_url)
    query_items: QueryItems = ()
    body = None
    query = components.query

    if method in QUERY_METHODS:
        # nested values are sent as their Python repr, not as JSON
        query_items = tuple((key, str(value)) for key, value in params.items())
        query = urlencode(query_items)
    else:
        body = json.dumps(params).encode()

    url = urlunsplit(
        components._replace(path=components.path + path, query=query),
    )
    return RequestDescriptor(
        method=method,
        url=url,
        headers=dict(JSON_HEADERS),
        query_items=query_items,
        body=body,
    )
