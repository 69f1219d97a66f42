from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from staff.domain.events import StaffMemberAdded, StaffMemberRemoved, PasswordChanged

LOCATION_TYPES = ["PHC", "District", "Corporation", "Block", "Municipality"]

DESIGNATIONS = [
    "Data Manager",
    "Medical Officer",
    "Health Inspector",
    "Block Medical Officer",
    "Zonal Medical Officer",
    "City Health Officer",
    "District Health Officer",
    "Municipal Health Officer",
    "Sanitary Inspector",
    "Sanitary Officer",
    "District Entomologist",
    "Junior Entomologist",
    "District Epidemiologist",
]

# Roles allowed to reset other members' passwords
PASSWORD_RESET_ROLES = {"Data Manager", "District Epidemiologist"}

DEFAULT_LOCATION_NAME = "Headquarters"
MIN_PASSWORD_LENGTH = 4


class InvalidCredentials(Exception):
    """Raised when no staff member matches a user id and password."""


class StaffMemberNotFound(Exception):
    pass


class NotPermitted(Exception):
    """Raised when the requesting staff member's role does not allow an action."""


class PasswordChangeRejected(ValueError):
    pass


@dataclass(eq=False)
class StaffMember:
    id: str
    user_id: str              # phone number
    password: str             # plaintext, compared by equality
    name: str
    email: str
    phone_number: str
    role: str
    location_type: str        # one of LOCATION_TYPES
    location_name: str
    created_at: datetime = None
    events: List = field(default_factory=list)

    def __eq__(self, other):
        if not isinstance(other, StaffMember):
            return False
        return other.id == self.id

    def __hash__(self):
        return hash(self.id)

    @classmethod
    def register(cls, name: str, email: str, phone_number: str, role: str,
                 location_type: str, location_name: str, password: str) -> "StaffMember":
        """New directory entry: the phone number is the user id."""
        if location_type not in LOCATION_TYPES:
            raise ValueError(f"Unknown location type: {location_type}")
        member = cls(
            id=str(uuid4()),
            user_id=phone_number,
            password=password,
            name=name,
            email=email,
            phone_number=phone_number,
            role=role,
            location_type=location_type,
            location_name=location_name or DEFAULT_LOCATION_NAME,
            created_at=datetime.now(timezone.utc),
        )
        member.events.append(StaffMemberAdded(staff_id=member.id, name=member.name))
        return member

    def check_credentials(self, user_id: str, password: str) -> bool:
        return self.user_id == user_id and self.password == password

    def can_reset_passwords(self) -> bool:
        return self.role in PASSWORD_RESET_ROLES

    def change_password(self, new_password: str, confirm_password: str) -> None:
        if new_password != confirm_password:
            raise PasswordChangeRejected("Passwords do not match.")
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise PasswordChangeRejected("Password is too short.")
        self.password = new_password
        self.events.append(PasswordChanged(staff_id=self.id))

    def reset_password(self, requested_by: "StaffMember", default_password: str) -> None:
        if not requested_by.can_reset_passwords():
            raise NotPermitted(f"Role {requested_by.role!r} may not reset passwords")
        self.password = default_password
        self.events.append(PasswordChanged(staff_id=self.id, reset=True))

    def mark_removed(self) -> None:
        self.events.append(StaffMemberRemoved(staff_id=self.id))

    def profile(self) -> Dict[str, Any]:
        """Public view of the member; the password is left out."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "phone_number": self.phone_number,
            "role": self.role,
            "location_type": self.location_type,
            "location_name": self.location_name,
            "created_at": self.created_at,
        }


@dataclass(unsafe_hash=True)
class StaffSession:
    token: str
    staff_id: str
    started_at: datetime = None

    @classmethod
    def open(cls, staff_id: str) -> "StaffSession":
        return cls(token=uuid4().hex, staff_id=staff_id, started_at=datetime.now(timezone.utc))


def authenticate(members: List[StaffMember], user_id: str, password: str) -> Optional[StaffMember]:
    """First member whose user id and password both match, if any."""
    return next((m for m in members if m.check_credentials(user_id, password)), None)
