"""
Lead models.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LeadInput:
    """Contact data supplied by the caller."""
    name: str
    phone: str
    email: str = ""
    message: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "message": self.message,
        }


@dataclass(frozen=True)
class CapturedLead:
    """Receipt returned by a lead store."""
    id: str
    backend: str


@dataclass(frozen=True)
class LeadCaptureResult:
    """Outcome of a capture as reported to channels."""
    saved: bool
    backend: str
    id: Optional[str] = None
    error: Optional[str] = None
