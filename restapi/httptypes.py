JsonValue = (
    bool | int | float | str | None | list["JsonValue"] | dict[str, "JsonValue"]
)
JsonList = list[JsonValue]
JsonDict = dict[str, JsonValue]
Json = JsonList | JsonDict
Headers = dict[str, str]
QueryItems = tuple[tuple[str, str], ...]
