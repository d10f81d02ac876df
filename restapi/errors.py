from .httptypes import JsonValue


class InvalidBaseUrlError(ValueError):
    def __init__(self, base_url: str) -> None:
        super().__init__(f"Invalid base URL: {base_url!r}")
        self.base_url = base_url


class ServiceError(Exception):
    """Failure of a single request, delivered through the completion callback."""

    @property
    def description(self) -> str:
        return str(self)


class NoConnectivityError(ServiceError):
    def __init__(self) -> None:
        super().__init__("No internet connection")


class CustomError(ServiceError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class OtherError(ServiceError):
    def __init__(self, status_code: int | None = None) -> None:
        super().__init__("Something went wrong")
        self.status_code = status_code


class TransportFailureError(ServiceError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Transport failure: {cause}")
        self.cause = cause


def service_error_from_json(
    json: JsonValue,
    status_code: int | None = None,
) -> ServiceError:
    match json:
        case {"message": str() as message}:
            return CustomError(message, status_code=status_code)
        case _:
            return OtherError(status_code=status_code)
