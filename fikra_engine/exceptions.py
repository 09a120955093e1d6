"""Exceptions raised by the service layer."""


class FikraEngineError(Exception):
    """Base error for the categorization and matching service."""


class IdeaNotFoundError(FikraEngineError):
    """Raised when an idea id has no row in the idea store."""

    def __init__(self, idea_id: str) -> None:
        super().__init__(f"Idea not found: {idea_id}")
        self.idea_id = idea_id
