from .httptypes import Headers

SENSITIVE_HEADERS = frozenset({"Authorization"})


def request_repr(
    method: str,
    url: str,
    headers: Headers,
    body: bytes | None,
    sensitive_headers: set[str] | frozenset[str] | None = None,
) -> str:
    if sensitive_headers is None:
        sensitive_headers = SENSITIVE_HEADERS

    return str(
        {
            "method": method,
            "url": url,
            "headers": masked_headers(headers, sensitive_headers),
            "body": body.decode(errors="replace") if body is not None else None,
        },
    )


def masked_headers(
    headers: Headers,
    sensitive_headers: set[str] | frozenset[str],
) -> dict[str, str]:
    return {
        header: masked_header_value(header, value, sensitive_headers)
        for header, value in headers.items()
    }


def masked_header_value(
    header: str,
    value: str | bytes,
    sensitive_headers: set[str] | frozenset[str],
) -> str:
    if isinstance(value, bytes):
        value = value.decode()

    if header in sensitive_headers:
        length = len(value)
        begin = value[:10]
        return f"{begin}*** ({length} chars)"

    return value
