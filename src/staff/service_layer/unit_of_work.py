# pylint: disable=attribute-defined-outside-init
from __future__ import annotations
from sqlalchemy.orm.session import Session

from shared.adapters.database import DEFAULT_SESSION_FACTORY
from shared.service_layer.unit_of_work import AbstractUnitOfWork
from staff.adapters import repository


class AbstractStaffUnitOfWork(AbstractUnitOfWork):
    staff: repository.AbstractRepository
    sessions: repository.AbstractSessionRepository

    def _seen_aggregates(self):
        return self.staff.seen


class SqlAlchemyUnitOfWork(AbstractStaffUnitOfWork):
    def __init__(self, session_factory=DEFAULT_SESSION_FACTORY):
        self.session_factory = session_factory

    def __enter__(self):
        self.session = self.session_factory()  # type: Session
        self.staff = repository.SqlAlchemyRepository(self.session)
        self.sessions = repository.SqlAlchemySessionRepository(self.session)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.session.close()

    def _commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()
