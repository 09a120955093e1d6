"""CategoryTags - Output model for rule-based idea categorization."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .idea import Idea


class CategorizationRequest(BaseModel):
    """Input fields for auto-categorization of a single idea."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    problem_statement: Optional[str] = Field(None, description="Problem text")
    proposed_solution: Optional[str] = Field(None, description="Solution text")
    category: Optional[str] = Field(None, description="Category code")
    location: Optional[str] = Field(None, description="City code")
    estimated_cost: Optional[str] = Field(None, description="Free-form cost estimate")
    ai_capabilities_needed: Optional[list[str]] = Field(None, description="AI capabilities required")
    integration_points: Optional[list[str]] = Field(None, description="Integration points")
    use_ai_fallback: bool = Field(
        default=True,
        description="Ask the priority suggester when rules find no priority",
    )

    @classmethod
    def from_idea(cls, idea: Idea, use_ai_fallback: bool = True) -> "CategorizationRequest":
        return cls(
            problem_statement=idea.problem_statement,
            proposed_solution=idea.proposed_solution,
            category=idea.category,
            location=idea.location,
            estimated_cost=idea.estimated_cost,
            ai_capabilities_needed=idea.ai_capabilities_needed,
            integration_points=idea.integration_points,
            use_ai_fallback=use_ai_fallback,
        )


class SDGAlignment(BaseModel):
    """SDG tags derived from national priorities."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sdg_tags: list[int] = Field(..., description="Unique SDG ids (1-17), at most 5")
    sdg_auto_tagged: bool = Field(default=True, description="Tags produced by rules, not a reviewer")
    sdg_confidence: dict[str, float] = Field(..., description="sdg_<n> -> confidence")
    morocco_priorities: list[str] = Field(..., description="Priorities the tags were derived from")


class CategoryTags(BaseModel):
    """Derived categorization of an idea.

    ``sdg_alignment`` is present exactly when ``moroccan_priorities`` is non-empty.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "moroccanPriorities": ["green_morocco", "rural_development"],
                "budgetTier": "1K-5K",
                "locationType": "rural",
                "complexity": "beginner",
                "sdgAlignment": {
                    "sdgTags": [7, 13, 15, 1, 2],
                    "sdgAutoTagged": True,
                    "sdgConfidence": {"sdg_7": 0.9, "sdg_13": 0.9, "sdg_15": 0.9, "sdg_1": 0.9, "sdg_2": 0.9},
                    "moroccoPriorities": ["green_morocco", "rural_development"],
                },
            }
        },
    )

    moroccan_priorities: list[str] = Field(default_factory=list, description="0-3 national priority codes")
    budget_tier: Optional[str] = Field(None, description="<1K, 1K-5K, 5K-10K, 10K+")
    location_type: Optional[str] = Field(None, description="urban, rural, both")
    complexity: Optional[str] = Field(None, description="beginner, intermediate, advanced")
    sdg_alignment: Optional[SDGAlignment] = Field(None, description="SDG tags derived from priorities")

    def to_update_payload(self) -> dict:
        """Column values for writing the tags back onto the idea row."""
        return {
            "moroccan_priorities": self.moroccan_priorities,
            "budget_tier": self.budget_tier,
            "location_type": self.location_type,
            "complexity": self.complexity,
            "sdg_alignment": (
                self.sdg_alignment.model_dump(by_alias=True) if self.sdg_alignment else None
            ),
        }
