"""Domain events for case mgmt service."""

from dataclasses import dataclass

from shared.domain.commands import Event


@dataclass
class CaseCreated(Event):
    """Event raised when a case has been successfully created."""
    case_id: str
    status: str


@dataclass
class FollowUpLogged(Event):
    """Event raised when a follow-up entry has been appended to a case."""
    case_id: str
    record_id: str
    status: str
