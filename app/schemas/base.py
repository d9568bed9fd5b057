"""
Base schema for the public API.

Fields are declared in snake_case and exposed as camelCase on the wire
(``num_employees`` <-> ``numEmployees``). The camelCase names are also the
logical names the data-access layer translates into column names.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema that reads and writes camelCase JSON."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class RequestModel(CamelModel):
    """Request body schema; unknown fields are rejected."""

    class Config:
        extra = "forbid"

    def to_fields(self) -> dict:
        """Only the fields the client actually sent, keyed by wire name."""
        return self.model_dump(by_alias=True, exclude_unset=True)
