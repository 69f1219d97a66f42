"""Domain events for the staff directory service."""

from dataclasses import dataclass

from shared.domain.commands import Event


@dataclass
class StaffMemberAdded(Event):
    """Event raised when a staff member has been added to the directory."""
    staff_id: str
    name: str


@dataclass
class StaffMemberRemoved(Event):
    """Event raised when a staff member has been removed from the directory."""
    staff_id: str


@dataclass
class PasswordChanged(Event):
    staff_id: str
    reset: bool = False  # True when set back to the default by another member
