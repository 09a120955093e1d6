"""MentorProfile - Diaspora mentor candidate read from the profile store."""

from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class MentorProfile(BaseModel):
    """Diaspora profile considered as a match candidate.

    Rows from ``marrai_diaspora_profiles`` are loosely typed, so every
    field is normalized instead of rejected.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: Optional[str] = Field(None, description="Profile UUID")
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Contact email")
    expertise: list[str] = Field(default_factory=list, description="Expertise areas")
    skills: list[str] = Field(default_factory=list, description="Skills")
    location: Optional[str] = Field(None, description="City")
    willing_to_mentor: bool = Field(default=False, description="Offers mentorship")
    willing_to_cofund: bool = Field(default=False, description="Offers co-funding")
    attended_workshop: bool = Field(
        default=False,
        validation_alias=AliasChoices("attended_workshop", "attendedWorkshop", "attended_kenitra"),
        description="Attended the Kenitra in-person workshop",
    )

    @field_validator("id", mode="before")
    @classmethod
    def id_as_text(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("expertise", mode="before")
    @classmethod
    def expertise_list(cls, v: Any) -> list[str]:
        if v is None or v == "":
            return []
        if isinstance(v, (list, tuple)):
            return [str(e) for e in v if e is not None]
        return [str(v)]

    @field_validator("skills", mode="before")
    @classmethod
    def skills_list(cls, v: Any) -> list[str]:
        if not isinstance(v, (list, tuple)):
            return []
        return [str(s) for s in v if s is not None]

    @field_validator("location", "name", "email", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v)

    @field_validator("willing_to_mentor", "willing_to_cofund", "attended_workshop", mode="before")
    @classmethod
    def strictly_true(cls, v: Any) -> bool:
        # Only an explicit boolean true counts; "yes", 1 and friends do not.
        return v is True

    @property
    def display_name(self) -> str:
        return self.name or self.email or "Anonymous"
