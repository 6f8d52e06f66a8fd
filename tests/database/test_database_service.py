import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from timelock_vdf.database import database
from timelock_vdf.database.DatabaseService import DatabaseService
from timelock_vdf.database.entity import RSAEntity, VDFEntity
from timelock_vdf.vdf import EfficientVDFSolver


@pytest.fixture
def engine():
    engine = create_engine("sqlite:///:memory:")
    database.set_engine(engine)
    database.initialize_db()
    yield engine
    database.get_orm_base().metadata.drop_all(engine)
    database.set_engine(None)


@pytest.fixture
def session(engine):
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


def test_engine_comes_from_environment(monkeypatch):
    database.set_engine(None)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    try:
        assert database.get_engine().url.database == ":memory:"
        assert database.get_engine() is database.get_engine()
    finally:
        database.set_engine(None)


def test_save_many(session):
    rsa_entity = RSAEntity("0b", "0d", "8f", "78")
    vdf_entity = VDFEntity("aa", "16", "8f", "10", "2a", rsa_entity.id)
    DatabaseService.save_many([rsa_entity, vdf_entity])

    assert session.query(RSAEntity).count() == 1
    assert session.query(VDFEntity).one().rsa.phi == "78"


def test_saved_entity_stays_readable(session):
    rsa_entity = RSAEntity("0b", "0d", "8f", "78")
    rsa_entity.save()

    # Attributes must not be expired once the saving session is closed
    assert rsa_entity.id
    assert rsa_entity.phi == "78"
    assert session.query(RSAEntity).filter_by(id=rsa_entity.id).one().N == "8f"


def test_save_solved_with_trapdoor(session, rsa, unsolved):
    solved = EfficientVDFSolver.solve(rsa, unsolved)
    vdf_id = DatabaseService.save_solved(solved, rsa)

    stored = session.query(VDFEntity).filter_by(id=vdf_id).one()
    assert stored.y == hex(solved.get_y())[2:]
    assert stored.rsa.p == hex(rsa.get_p())[2:]


def test_save_created(session, rsa, unsolved):
    solved = EfficientVDFSolver.solve(rsa, unsolved)
    ids = DatabaseService.save_created([(unsolved, rsa, solved)])
    assert len(ids) == 1
    assert session.query(VDFEntity).filter_by(id=ids[0]).one().t == "1024"
