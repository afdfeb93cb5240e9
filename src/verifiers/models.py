"""Data models for submission verification."""

from typing import Optional, Literal
from pydantic import BaseModel


Role = Literal["system", "user", "assistant"]
RejectionCode = Literal["TOO_SHORT", "ALREADY_USED", "NOT_POSSIBLE", "NOT_REAL"]


class Message(BaseModel):
    """Represents a single message sent to the dictionary judge."""
    role: Role
    content: str


class ValidationError(BaseModel):
    """A single rejection, shown to the player as an alert."""
    code: RejectionCode
    title: str
    message: str
    word: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of validating one candidate word."""
    valid: bool
    word: str
    error: Optional[ValidationError] = None
