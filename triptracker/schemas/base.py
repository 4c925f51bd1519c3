"""
Base model for records exchanged with the resource server.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    camelCase on the wire, snake_case in Python.

    Unknown fields are kept so a read-modify-write cycle never drops
    data another client stored on the record.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
