"""Message base classes routed by the staff and case message buses."""

from dataclasses import dataclass


@dataclass
class Command:
    """A request to change state; exactly one handler."""


@dataclass
class Event:
    """Something that happened; any number of handlers, failures are logged."""
