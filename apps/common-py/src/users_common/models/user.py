"""User record and inbound payload models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic_core import PydanticCustomError

MIN_AGE = 0
MAX_AGE = 150


class User(BaseModel):
    """Persisted user record."""

    id: str = Field(..., description="System-assigned user ID")
    first_name: str = Field(..., alias="firstName", min_length=1, description="First name")
    second_name: str = Field(..., alias="secondName", min_length=1, description="Second name")
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE, description="Age in years")
    city: str | None = Field(None, min_length=1, description="City of residence")

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "1718035200000",
                "firstName": "Ana",
                "secondName": "Li",
                "age": 30,
                "city": "Lisbon",
            }
        },
    )

    def to_document(self) -> dict[str, Any]:
        """Serialize for the JSON file, omitting an absent city."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UserPayload(BaseModel):
    """Body accepted by create and update.

    Fields are declared in the order violations are reported.
    """

    first_name: str = Field(..., alias="firstName", min_length=1)
    second_name: str = Field(..., alias="secondName", min_length=1)
    age: StrictInt = Field(..., ge=MIN_AGE, le=MAX_AGE)
    city: str | None = Field(None, min_length=1)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"firstName": "Ana", "secondName": "Li", "age": 30}},
    )

    @field_validator("age", mode="before")
    @classmethod
    def _coerce_integral_age(cls, value: Any) -> Any:
        # 30.0 counts as 30; strings, booleans and 30.5 still fail StrictInt.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator("city", mode="before")
    @classmethod
    def _reject_null_city(cls, value: Any) -> Any:
        # Omitting city is allowed, sending null is not.
        if value is None:
            raise PydanticCustomError("string_type", "Input should be a valid string")
        return value
