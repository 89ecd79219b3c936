"""Base model classes and utilities for MongoDB documents.

Common fields, ObjectId handling and serialization shared by every document
model in CareerPilot.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Type, TypeVar

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from careerpilot.utils.datetime_utils import utc_now


class PyObjectId(ObjectId):
    """ObjectId type usable as a Pydantic field.

    Accepts ObjectId instances or their 24-character hex form and serializes
    to a string in JSON mode.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: Any
    ) -> core_schema.CoreSchema:
        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(ObjectId),
                core_schema.chain_schema(
                    [
                        core_schema.str_schema(),
                        core_schema.no_info_plain_validator_function(cls.validate),
                    ]
                ),
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda x: str(x),
                return_schema=core_schema.str_schema(),
                when_used="json",
            ),
        )

    @classmethod
    def validate(cls, value: Any) -> ObjectId:
        """Validate and convert a value to ObjectId.

        Raises:
            ValueError: If the value is not a valid ObjectId
        """
        if isinstance(value, ObjectId):
            return value
        if isinstance(value, str) and ObjectId.is_valid(value):
            return ObjectId(value)
        raise ValueError("Invalid ObjectId")

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: Any
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema())


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convert a string id to ObjectId, returning None when it is malformed."""
    try:
        return PyObjectId.validate(value)
    except ValueError:
        return None


T = TypeVar("T", bound="BaseDocument")


class BaseDocument(BaseModel):
    """Base model for all MongoDB documents."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
    )

    id: Optional[PyObjectId] = Field(default=None, alias="_id")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __init__(self, **data: Any) -> None:
        if "id" not in data and "_id" not in data:
            data["_id"] = ObjectId()
        super().__init__(**data)

    @field_validator("id", mode="before")
    @classmethod
    def validate_object_id(cls, value: Any) -> Optional[ObjectId]:
        if value is None:
            return None
        return PyObjectId.validate(value)

    @property
    def id_str(self) -> str:
        """String form of the document id."""
        return str(self.id) if self.id is not None else ""

    def to_mongo(self, **kwargs: Any) -> Dict[str, Any]:
        """Dictionary ready for insertion, with native ObjectIds and datetimes."""
        return self.model_dump(by_alias=True, **kwargs)

    def to_dict(self, **kwargs: Any) -> Dict[str, Any]:
        """JSON-friendly dictionary with string ids.

        Args:
            **kwargs: Additional arguments for model_dump

        Returns:
            Dict[str, Any]: Dictionary representation of the model
        """
        return self.model_dump(by_alias=True, mode="json", **kwargs)

    @classmethod
    def from_mongo(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create a model instance from a raw MongoDB document."""
        return cls.model_validate(data)

    def update_timestamps(self) -> None:
        """Update the updated_at timestamp to current time."""
        self.updated_at = utc_now()
