"""Seed structure schemas"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class ChapterSpec(BaseModel):
    """Declared chapter"""
    name: str
    order: int = 0

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("chapter name must not be empty")
        return value


class SubcategorySpec(BaseModel):
    """Declared subcategory with its ordered chapters"""
    name: str
    chapters: List[ChapterSpec] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("subcategory name must not be empty")
        return value


class RootSpec(BaseModel):
    """
    Declared root category

    Chapters declared directly on the root (no subcategories) are attached
    to an implicit "<root> - General" subcategory by the seeder.
    """
    name: str
    description: Optional[str] = None
    subcategories: List[SubcategorySpec] = Field(default_factory=list)
    chapters: List[ChapterSpec] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("category name must not be empty")
        return value

    @property
    def default_subcategory_name(self) -> str:
        return f"{self.name} - General"
