"""Career catalog schemas."""

from typing import List, Optional, Union

from pydantic import Field, field_validator

from careerpilot.schemas.base import BaseSchema, DocumentResponse, sanitize_tokens
from careerpilot.utils.constants import SaveToggleStatus


class CareerPathResponse(DocumentResponse):
    """A catalog entry as shown to students."""

    title: str
    description: str = ""
    required_skills: List[str] = Field(default_factory=list)
    skills_to_grow: List[str] = Field(default_factory=list)
    category: str = ""
    growth_outlook: str = ""
    estimated_salary: str = ""
    difficulty: Optional[str] = None


class CareerUpdateRequest(BaseSchema):
    """Administrative edit; omitted fields are left untouched."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    required_skills: Optional[List[str]] = None
    skills_to_grow: Optional[List[str]] = None
    category: Optional[str] = Field(None, min_length=1)
    growth_outlook: Optional[str] = None
    estimated_salary: Optional[str] = None
    difficulty: Optional[str] = None

    @field_validator("required_skills", "skills_to_grow", mode="before")
    @classmethod
    def split_tokens(cls, v: Union[str, List[str], None]) -> Optional[List[str]]:
        if v is None:
            return None
        return sanitize_tokens(v)


class SaveToggleResponse(BaseSchema):
    career_path_id: str
    status: SaveToggleStatus


class SavedCareerResponse(BaseSchema):
    saved_career_id: str
    career: CareerPathResponse


class CategoryListResponse(BaseSchema):
    categories: List[str] = Field(default_factory=list)


__all__ = [
    "CareerPathResponse",
    "CareerUpdateRequest",
    "CategoryListResponse",
    "SaveToggleResponse",
    "SavedCareerResponse",
]
