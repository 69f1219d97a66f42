# pylint: disable=attribute-defined-outside-init
from __future__ import annotations
from sqlalchemy.orm.session import Session

from shared.adapters.database import DEFAULT_SESSION_FACTORY
from shared.service_layer.unit_of_work import AbstractUnitOfWork
from case.adapters import repository


class AbstractCaseUnitOfWork(AbstractUnitOfWork):
    cases: repository.AbstractRepository

    def _seen_aggregates(self):
        return self.cases.seen


class SqlAlchemyUnitOfWork(AbstractCaseUnitOfWork):
    def __init__(self, session_factory=DEFAULT_SESSION_FACTORY):
        self.session_factory = session_factory

    def __enter__(self):
        self.session = self.session_factory()  # type: Session
        self.cases = repository.SqlAlchemyRepository(self.session)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.session.close()

    def _commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()
