"""MatchResult - Output model for idea-to-mentor matching."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MatchReasoning(BaseModel):
    """Per-component breakdown of a match score with a readable trail."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    expertise_overlap: int = Field(default=0, ge=0, description="Default max 40")
    skill_overlap: int = Field(default=0, ge=0, description="Default max 30")
    location_proximity: int = Field(default=0, ge=0, description="Default max 15")
    willingness_to_help: int = Field(default=0, ge=0, description="Default max 15")
    details: list[str] = Field(default_factory=list, description="Human-readable notes")


class MatchResult(BaseModel):
    """One ranked mentor candidate for an idea."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    profile_id: Optional[str] = Field(None, description="MentorProfile.id")
    profile_name: str = Field(default="Anonymous", description="Name, email or 'Anonymous'")
    profile_email: Optional[str] = Field(None, description="Contact email")
    score: int = Field(..., ge=0, le=100, description="Total compatibility score")
    reasoning: MatchReasoning = Field(default_factory=MatchReasoning)


class MatchOutcome(BaseModel):
    """Result of a full matching request, including write-back status."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    idea_id: str = Field(..., description="Matched idea")
    idea_title: Optional[str] = Field(None, description="Idea title")
    matches: list[MatchResult] = Field(default_factory=list, description="Top matches, best first")
    top_score: int = Field(default=0, description="Score of the best match, 0 if none")
    total_profiles_checked: int = Field(default=0, description="Candidates scored")
    persisted: bool = Field(default=False, description="Whether the write-back succeeded")
    message: str = Field(default="", description="Summary for the caller")
