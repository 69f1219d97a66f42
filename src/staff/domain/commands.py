"""Commands for the staff directory service."""

from dataclasses import dataclass

from shared.domain.commands import Command


@dataclass
class AddStaffMember(Command):
    """Command to add a staff member to the directory."""
    name: str
    email: str
    phone_number: str  # doubles as the login user id
    role: str
    location_type: str
    location_name: str = ""


@dataclass
class RemoveStaffMember(Command):
    staff_id: str


@dataclass
class ResetStaffPassword(Command):
    """Command to set a staff member's password back to the default."""
    staff_id: str
    requested_by: str  # staff_id of the logged-in member asking for the reset


@dataclass
class ChangePassword(Command):
    staff_id: str
    new_password: str
    confirm_password: str


@dataclass
class Login(Command):
    """Command to open a session for matching credentials."""
    user_id: str
    password: str


@dataclass
class Logout(Command):
    token: str
