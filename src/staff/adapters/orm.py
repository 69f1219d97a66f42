import logging
from sqlalchemy import (
    Table,
    Column,
    Integer,
    String,
    DateTime,
    event,
)
from sqlalchemy.orm import registry
from staff.domain import domain

logger = logging.getLogger(__name__)

# SQLAlchemy 2.0 pattern: use registry
mapper_registry = registry()
metadata = mapper_registry.metadata

# seq keeps insertion order; the directory lists newest first
staff_members = Table(
    "staff_members",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String(255), unique=True, nullable=False),
    Column("user_id", String(255), nullable=False, index=True),
    Column("password", String(255), nullable=False),
    Column("name", String(255), nullable=False),
    Column("email", String(255)),
    Column("phone_number", String(255)),
    Column("role", String(255)),
    Column("location_type", String(32)),
    Column("location_name", String(255)),
    Column("created_at", DateTime(timezone=True)),
)

staff_sessions = Table(
    "staff_sessions",
    metadata,
    Column("token", String(64), primary_key=True),
    Column("staff_id", String(255), nullable=False, index=True),
    Column("started_at", DateTime(timezone=True)),
)


def start_mappers():
    logger.info("Starting staff mappers")
    mapper_registry.map_imperatively(domain.StaffMember, staff_members)
    mapper_registry.map_imperatively(domain.StaffSession, staff_sessions)


@event.listens_for(domain.StaffMember, "load")
def receive_load(member, _):
    member.events = []
