import abc
from typing import List, Optional, Set
from staff.domain import domain

import logging

logger = logging.getLogger(__name__)


class AbstractRepository(abc.ABC):
    def __init__(self):
        self.seen = set()  # type: Set[domain.StaffMember]

    def add(self, member: domain.StaffMember) -> str:
        self._add(member)
        self.seen.add(member)
        return member.id

    def get(self, staff_id) -> Optional[domain.StaffMember]:
        member = self._get(staff_id)
        if member:
            self.seen.add(member)
        return member

    def get_by_credentials(self, user_id: str, password: str) -> Optional[domain.StaffMember]:
        member = self._get_by_credentials(user_id, password)
        if member:
            self.seen.add(member)
        return member

    def list(self) -> List[domain.StaffMember]:
        """All members, newest first."""
        members = self._list()
        for member in members:
            self.seen.add(member)
        return members

    def remove(self, member: domain.StaffMember) -> None:
        member.mark_removed()
        self.seen.add(member)
        self._remove(member)

    @abc.abstractmethod
    def _add(self, member: domain.StaffMember):
        raise NotImplementedError

    @abc.abstractmethod
    def _get(self, staff_id) -> Optional[domain.StaffMember]:
        raise NotImplementedError

    @abc.abstractmethod
    def _get_by_credentials(self, user_id: str, password: str) -> Optional[domain.StaffMember]:
        raise NotImplementedError

    @abc.abstractmethod
    def _list(self) -> List[domain.StaffMember]:
        raise NotImplementedError

    @abc.abstractmethod
    def _remove(self, member: domain.StaffMember):
        raise NotImplementedError


class SqlAlchemyRepository(AbstractRepository):
    def __init__(self, session):
        super().__init__()
        self.session = session

    def _add(self, member):
        self.session.add(member)

    def _get(self, staff_id):
        return self.session.query(domain.StaffMember).filter_by(id=staff_id).first()

    def _get_by_credentials(self, user_id, password):
        candidates = self.session.query(domain.StaffMember)\
            .filter_by(user_id=user_id)\
            .order_by(domain.StaffMember.seq.desc())\
            .all()
        return domain.authenticate(candidates, user_id, password)

    def _list(self):
        return self.session.query(domain.StaffMember)\
            .order_by(domain.StaffMember.seq.desc())\
            .all()

    def _remove(self, member):
        self.session.delete(member)


class AbstractSessionRepository(abc.ABC):
    @abc.abstractmethod
    def add(self, staff_session: domain.StaffSession) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, token: str) -> Optional[domain.StaffSession]:
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, token: str) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def delete_for_staff(self, staff_id: str) -> int:
        raise NotImplementedError


class SqlAlchemySessionRepository(AbstractSessionRepository):
    def __init__(self, session):
        self.session = session

    def add(self, staff_session):
        self.session.add(staff_session)
        return staff_session.token

    def get(self, token):
        return self.session.query(domain.StaffSession).filter_by(token=token).first()

    def delete(self, token):
        deleted = self.session.query(domain.StaffSession).filter_by(token=token).delete()
        return deleted > 0

    def delete_for_staff(self, staff_id):
        return self.session.query(domain.StaffSession).filter_by(staff_id=staff_id).delete()
