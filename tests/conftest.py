# pylint: disable=redefined-outer-name
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, clear_mappers
from sqlalchemy.pool import StaticPool

from staff.adapters import orm as staff_orm
from staff.adapters import repository as staff_repository
from staff.domain.domain import authenticate
from staff.service_layer.unit_of_work import AbstractStaffUnitOfWork
from case.adapters import orm as case_orm
from case.adapters import repository as case_repository
from case.service_layer.unit_of_work import AbstractCaseUnitOfWork


# ---------- Fakes for service-layer unit tests ----------

class FakeStaffRepository(staff_repository.AbstractRepository):
    def __init__(self, members=()):
        super().__init__()
        self._members = list(members)

    def _add(self, member):
        self._members.insert(0, member)

    def _get(self, staff_id):
        return next((m for m in self._members if m.id == staff_id), None)

    def _get_by_credentials(self, user_id, password):
        return authenticate(self._members, user_id, password)

    def _list(self):
        return list(self._members)

    def _remove(self, member):
        self._members.remove(member)


class FakeSessionRepository(staff_repository.AbstractSessionRepository):
    def __init__(self):
        self._sessions = {}

    def add(self, staff_session):
        self._sessions[staff_session.token] = staff_session
        return staff_session.token

    def get(self, token):
        return self._sessions.get(token)

    def delete(self, token):
        return self._sessions.pop(token, None) is not None

    def delete_for_staff(self, staff_id):
        tokens = [t for t, s in self._sessions.items() if s.staff_id == staff_id]
        for token in tokens:
            del self._sessions[token]
        return len(tokens)


class FakeStaffUnitOfWork(AbstractStaffUnitOfWork):
    def __init__(self, members=()):
        self.staff = FakeStaffRepository(members)
        self.sessions = FakeSessionRepository()
        self.committed = False

    def _commit(self):
        self.committed = True

    def rollback(self):
        pass


class FakeCaseRepository(case_repository.AbstractRepository):
    def __init__(self, cases=()):
        super().__init__()
        self._cases = list(cases)

    def _add(self, case):
        self._cases.insert(0, case)

    def _get(self, case_id):
        return next((c for c in self._cases if c.id == case_id), None)

    def _list(self):
        return list(self._cases)


class FakeCaseUnitOfWork(AbstractCaseUnitOfWork):
    def __init__(self, cases=()):
        self.cases = FakeCaseRepository(cases)
        self.committed = False

    def _commit(self):
        self.committed = True

    def rollback(self):
        pass


@pytest.fixture
def fake_staff_uow():
    return FakeStaffUnitOfWork()


@pytest.fixture
def fake_case_uow():
    return FakeCaseUnitOfWork()


# ---------- SQLite for integration and API tests ----------

@pytest.fixture
def sqlite_session_factory():
    """Create SQLite in-memory database for fast testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    staff_orm.metadata.create_all(engine)
    case_orm.metadata.create_all(engine)
    staff_orm.start_mappers()
    case_orm.start_mappers()

    yield sessionmaker(bind=engine)

    clear_mappers()
    engine.dispose()


@pytest.fixture
def staff_uow(sqlite_session_factory):
    from staff.service_layer.unit_of_work import SqlAlchemyUnitOfWork
    return SqlAlchemyUnitOfWork(session_factory=sqlite_session_factory)


@pytest.fixture
def case_uow(sqlite_session_factory):
    from case.service_layer.unit_of_work import SqlAlchemyUnitOfWork
    return SqlAlchemyUnitOfWork(session_factory=sqlite_session_factory)


@pytest.fixture
def api_client(sqlite_session_factory, monkeypatch):
    """TestClient over the app, wired to the in-memory database and seeded."""
    from fastapi.testclient import TestClient
    from shared.entrypoints.app import app
    from staff.entrypoints import staff_api
    from staff.service_layer import seed as staff_seed
    from staff.service_layer.unit_of_work import SqlAlchemyUnitOfWork as StaffUnitOfWork
    from case.entrypoints import case_api
    from case.service_layer import seed as case_seed
    from case.service_layer.unit_of_work import SqlAlchemyUnitOfWork as CaseUnitOfWork

    monkeypatch.setenv("LOGIN_DELAY_SECONDS", "0")

    staff_seed.seed_staff_directory(StaffUnitOfWork(sqlite_session_factory))
    case_seed.seed_cases(CaseUnitOfWork(sqlite_session_factory))

    app.dependency_overrides[staff_api.get_uow] = lambda: StaffUnitOfWork(sqlite_session_factory)
    app.dependency_overrides[case_api.get_uow] = lambda: CaseUnitOfWork(sqlite_session_factory)

    yield TestClient(app)

    app.dependency_overrides.clear()
