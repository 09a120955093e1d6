"""Idea - Shared model for citizen-submitted ideas read from the idea store."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Idea(BaseModel):
    """Idea record as stored in ``marrai_ideas``.

    Only the fields used by categorization and matching are modelled;
    unknown columns are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Identity
    id: Optional[str] = Field(None, description="Idea UUID")
    title: Optional[str] = Field(None, description="Idea title")
    status: Optional[str] = Field(None, description="Workflow status: submitted, analyzed, matched, ...")

    # Free-text content
    problem_statement: Optional[str] = Field(None, description="Problem described by the submitter")
    proposed_solution: Optional[str] = Field(None, description="Proposed solution")

    # Classification inputs
    category: Optional[str] = Field(None, description="Category code (health, tech, agriculture, ...)")
    location: Optional[str] = Field(None, description="City code or 'other'")
    estimated_cost: Optional[str] = Field(None, description="Free-form cost estimate, e.g. '3K-5K'")
    ai_capabilities_needed: Optional[list[str]] = Field(None, description="AI capabilities required")
    integration_points: Optional[list[str]] = Field(None, description="Systems to integrate with")
    submitter_skills: Optional[list[str]] = Field(None, description="Skills declared by the submitter")

    # Previously derived fields (denormalized on the idea row)
    moroccan_priorities: Optional[list[str]] = Field(None, description="Derived national priorities")
    budget_tier: Optional[str] = Field(None, description="Derived budget tier")
    location_type: Optional[str] = Field(None, description="Derived location type")
    complexity: Optional[str] = Field(None, description="Derived complexity")

    @field_validator(
        "ai_capabilities_needed",
        "integration_points",
        "submitter_skills",
        "moroccan_priorities",
        mode="before",
    )
    @classmethod
    def list_or_none(cls, v: Any) -> Optional[list[str]]:
        """Loosely-typed rows sometimes carry JSON strings or scalars here."""
        if not isinstance(v, list):
            return None
        return [str(item) for item in v if item is not None]

    @field_validator(
        "id",
        "title",
        "status",
        "problem_statement",
        "proposed_solution",
        "category",
        "location",
        "estimated_cost",
        mode="before",
    )
    @classmethod
    def text_or_none(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v)


class IdeaForMatching(BaseModel):
    """Subset of an idea consumed by the match scorer."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: Optional[str] = Field(None, description="Idea UUID")
    title: Optional[str] = Field(None, description="Idea title")
    status: Optional[str] = Field(None, description="Workflow status")
    category: Optional[str] = Field(None, description="Category code")
    location: Optional[str] = Field(None, description="City code")
    submitter_skills: list[str] = Field(default_factory=list, description="Submitter skills")

    @field_validator("submitter_skills", mode="before")
    @classmethod
    def skills_list(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        return [str(item) for item in v if item is not None]

    @field_validator("id", "title", "status", "category", "location", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v)

    @classmethod
    def from_idea(cls, idea: Idea) -> "IdeaForMatching":
        return cls(
            id=idea.id,
            title=idea.title,
            status=idea.status,
            category=idea.category,
            location=idea.location,
            submitter_skills=idea.submitter_skills or [],
        )
