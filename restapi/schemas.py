from typing import Self

import pydantic

from .httptypes import JsonDict, JsonValue


class User(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    id: str = pydantic.Field(min_length=1)
    email: str | None = None
    name: str | None = None

    @classmethod
    def from_json(cls, json: JsonValue) -> Self | None:
        """Parse a user record, or return None when ``id`` is unusable.

        Optional fields of the wrong type are dropped rather than rejected.
        """
        match json:
            case {"id": str() as user_id, **fields} if user_id:
                return cls(
                    id=user_id,
                    email=_optional_str(fields.get("email")),
                    name=_optional_str(fields.get("name")),
                )
            case _:
                return None

    def to_json(self) -> JsonDict:
        return self.model_dump(exclude_none=True)


def _optional_str(value: JsonValue) -> str | None:
    return value if isinstance(value, str) else None
