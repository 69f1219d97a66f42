import abc
from case.domain import domain
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class AbstractRepository(abc.ABC):
    def __init__(self):
        self.seen = set()

    def add(self, case: domain.Case) -> str:
        self._add(case)
        self.seen.add(case)
        return case.id

    def get(self, case_id) -> Optional[domain.Case]:
        case = self._get(case_id)
        if case:
            self.seen.add(case)
        return case

    def list(self) -> List[domain.Case]:
        """All cases, newest first."""
        cases = self._list()
        for case in cases:
            self.seen.add(case)
        return cases

    @abc.abstractmethod
    def _add(self, case: domain.Case):
        raise NotImplementedError

    @abc.abstractmethod
    def _get(self, case_id) -> Optional[domain.Case]:
        raise NotImplementedError

    @abc.abstractmethod
    def _list(self) -> List[domain.Case]:
        raise NotImplementedError


class SqlAlchemyRepository(AbstractRepository):
    def __init__(self, session):
        super().__init__()
        self.session = session

    def _add(self, case):
        self.session.add(case)

    def _get(self, case_id):
        return self.session.query(domain.Case).filter_by(id=case_id).first()

    def _list(self):
        return self.session.query(domain.Case)\
            .order_by(domain.Case.seq.desc())\
            .all()
