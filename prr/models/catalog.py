from pydantic import BaseModel, ConfigDict, Field, field_validator
from uuid import uuid4
from typing import Optional


class Service(BaseModel):
    """
    A product or component that undergoes Product Readiness Reviews.
    """

    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique service identifier")
    name: str = Field(..., min_length=1, max_length=255, description="Human-readable service name")


class ServiceCreate(BaseModel):
    name: str = Field(..., description="Service name (matched case-insensitively)")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Service name cannot be empty")
        return v


class Section(BaseModel):
    """
    Thematic grouping of questions within a PRR.
    """

    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique section identifier")
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", description="Purpose of the section")


class SectionCreate(BaseModel):
    name: str
    description: str = ""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Section name is required")
        return v


class Question(BaseModel):
    """
    A single question of the catalog.

    Frozen: scoring works against a point-in-time snapshot of the catalog,
    so entries are replaced on update rather than mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique question identifier")
    section_id: str = Field(default="", description="Section this question belongs to")
    text: str = Field(default="", description="Display text")
    blurb: str = Field(default="", description="Supporting context shown with the question")
    supporting_link: str = Field(default="", description="Link to further reading")
    is_essential: bool = False
    order: int = Field(default=0, description="Display order within the section")


class QuestionCreate(BaseModel):
    section_id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    blurb: str = ""
    supporting_link: str = ""
    is_essential: bool = False
    order: int = 0


class QuestionUpdate(BaseModel):
    """Partial update; unset fields are left unchanged."""

    section_id: Optional[str] = None
    text: Optional[str] = None
    blurb: Optional[str] = None
    supporting_link: Optional[str] = None
    is_essential: Optional[bool] = None
    order: Optional[int] = None
