"""Sample staff directory loaded into an empty database."""

import logging
from datetime import datetime, timedelta, timezone

import config
from staff.domain.domain import StaffMember
from staff.service_layer.unit_of_work import AbstractStaffUnitOfWork

logger = logging.getLogger(__name__)

SAMPLE_STAFF = [
    # (id, name, email, phone, role, location type, location name, age in days)
    ("1", "Dr. Sarah Chen", "chen.s@denguepro.org", "5551234567",
     "District Entomologist", "District", "Central District", 0),
    ("2", "James Okonjo", "okonjo.j@denguepro.org", "5559876543",
     "Health Inspector", "Block", "North Sector Block 4", 1),
    ("3", "Anita Roy", "anita.roy@denguepro.org", "5553421111",
     "Medical Officer", "PHC", "West Hills PHC", 2),
    ("demo-user", "Demo User", "demo@denguepro.org", "9894585495",
     "Data Manager", "District", "Training District", 0),
]


def sample_staff(now: datetime = None):
    now = now or datetime.now(timezone.utc)
    return [
        StaffMember(
            id=staff_id,
            user_id=phone,
            password=config.get_default_password(),
            name=name,
            email=email,
            phone_number=phone,
            role=role,
            location_type=location_type,
            location_name=location_name,
            created_at=now - timedelta(days=age_days),
        )
        for staff_id, name, email, phone, role, location_type, location_name, age_days in SAMPLE_STAFF
    ]


def seed_staff_directory(uow: AbstractStaffUnitOfWork) -> int:
    """Add the sample staff when the directory is empty. Returns the number added."""
    with uow:
        if uow.staff.list():
            return 0
        # listing is newest first, so insert in reverse to keep the sample order
        members = sample_staff()
        for member in reversed(members):
            uow.staff.add(member)
        uow.commit()

    logger.info(f"Seeded {len(members)} sample staff members")
    return len(members)
