import logging
from sqlalchemy import (
    Table,
    Column,
    Integer,
    String,
    Text,
    Date,
    ForeignKey,
    event,
)
from sqlalchemy.orm import registry, relationship
from case.domain import domain


logger = logging.getLogger(__name__)

mapper_registry = registry()
metadata = mapper_registry.metadata

# seq keeps insertion order; cases and follow-ups list newest first
cases = Table(
    "cases",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String(255), unique=True, nullable=False),
    Column("patient_name", String(255), nullable=False),
    Column("age", Integer, nullable=False, server_default="0"),
    Column("gender", String(16)),
    Column("address", String(255)),
    Column("location", String(255)),
    Column("diagnosis_date", Date),
    Column("status", String(32), nullable=False, index=True),
    Column("contact_number", String(64)),
    Column("follow_up_status", String(32), nullable=False),
    Column("follow_up_note", Text),
    Column("last_follow_up_date", Date),
)

follow_up_records = Table(
    "follow_up_records",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String(255), unique=True, nullable=False),
    Column("case_id", String(255), ForeignKey("cases.id"), nullable=False, index=True),
    Column("date", Date),
    Column("status", String(32)),
    Column("remarks", Text),
    Column("added_by", String(255)),
)


def start_mappers():
    logger.info("Starting case mappers")

    mapper_registry.map_imperatively(domain.FollowUpRecord, follow_up_records)
    mapper_registry.map_imperatively(
        domain.Case,
        cases,
        properties={
            "history": relationship(
                domain.FollowUpRecord,
                order_by=follow_up_records.c.seq.desc(),
                cascade="all, delete-orphan",
                lazy="selectin",
            ),
        },
    )


@event.listens_for(domain.Case, "load")
def receive_load(case, _):
    case.events = []
