"""CategorizationStats - Coverage report over categorized ideas."""

from pydantic import BaseModel, Field


class FieldCoverage(BaseModel):
    """How many ideas carry a value for one derived field."""

    count: int = Field(default=0, ge=0)
    percentage: int = Field(default=0, ge=0, le=100)


class UncategorizedIdea(BaseModel):
    id: str
    title: str | None = None
    created_at: str | None = None


class CategorizationStats(BaseModel):
    """Coverage and distribution of the derived categorization columns."""

    total: int = Field(default=0, description="Ideas considered")
    coverage: dict[str, FieldCoverage] = Field(default_factory=dict, description="Per-field coverage")
    priorities: dict[str, int] = Field(default_factory=dict, description="Priority code -> idea count")
    budget_tiers: dict[str, int] = Field(default_factory=dict, description="Budget tier -> idea count")
    complexities: dict[str, int] = Field(default_factory=dict, description="Complexity -> idea count")
    uncategorized: list[UncategorizedIdea] = Field(
        default_factory=list, description="Newest ideas with no derived field at all"
    )
