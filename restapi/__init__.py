from .client import WebClient
from .errors import (
    CustomError,
    InvalidBaseUrlError,
    NoConnectivityError,
    OtherError,
    ServiceError,
    TransportFailureError,
)
from .reachability import Reachability
from .requests_factory import RequestDescriptor, RequestMethod, build_request
from .schemas import User
from .services import FriendsService
from .transport import RequestsTransport, Transport, TransportResult

__all__ = [
    "CustomError",
    "FriendsService",
    "InvalidBaseUrlError",
    "NoConnectivityError",
    "OtherError",
    "Reachability",
    "RequestDescriptor",
    "RequestMethod",
    "RequestsTransport",
    "ServiceError",
    "Transport",
    "TransportFailureError",
    "TransportResult",
    "User",
    "WebClient",
]
