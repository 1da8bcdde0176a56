"""User Schemas - the JSON contract for the User entity.

Invariants:
    - Wire keys are Id, Name, Email, Phone, Age, serialized in that order
    - Serialized JSON uses compact separators (no spaces)
    - Missing keys take zero values (0 / ""); unknown keys are ignored
    - Incoming keys match case-insensitively ("ID", "email"); the last match wins
    - Wrong JSON types are rejected (strict): "Age": "23" is a malformed body
    - Id and Age must fit a signed 64-bit integer

Design Decisions:
    - Aliases carry the wire names; Python code uses snake_case field names
    - populate_by_name: repository and tests build schemas by field name
"""

from typing import Any

from pydantic import (
    BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, model_validator,
)

from user_crud.core.domain_types import INT64_MAX, INT64_MIN, USER_FIELDS

_WIRE_KEYS = {name.lower(): name for name in USER_FIELDS}


class UserSchema(BaseModel):
    """User record as exchanged with clients."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: StrictInt = Field(0, alias="Id", ge=INT64_MIN, le=INT64_MAX)
    name: StrictStr = Field("", alias="Name")
    email: StrictStr = Field("", alias="Email")
    phone: StrictStr = Field("", alias="Phone")
    age: StrictInt = Field(0, alias="Age", ge=INT64_MIN, le=INT64_MAX)

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        folded: dict[str, Any] = {}
        for key, value in data.items():
            wire = _WIRE_KEYS.get(key.lower()) if isinstance(key, str) else None
            folded[wire or key] = value
        return folded

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


_USER_LIST = TypeAdapter(list[UserSchema])


def parse_user_json(raw: bytes | str) -> UserSchema:
    """Parse a request body. Raises pydantic.ValidationError when malformed."""
    return UserSchema.model_validate_json(raw)


def dump_user_list(users: list[UserSchema]) -> bytes:
    """Serialize users as a JSON array, `[]` when empty."""
    return _USER_LIST.dump_json(users, by_alias=True)
