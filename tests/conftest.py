import os
import sys

# Add the current directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import datetime as dt

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import cadastro_alunos.db.base  # noqa: F401
from cadastro_alunos.db.base_class import Base
from cadastro_alunos.models.aluno import Aluno, Pessoa


@pytest.fixture(scope="session")
def engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="session")
def TestingSessionLocal(engine):
    """Create a session factory for the test database."""
    return sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )


@pytest.fixture(autouse=True)
def _limpa_tabelas(engine):
    """Each test starts with empty tables (the engine is shared per session)."""
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def override_get_db(TestingSessionLocal):
    """Override the database dependency to use our test database."""
    def _override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()
    return _override_get_db


@pytest.fixture
def db_session(TestingSessionLocal):
    """Create a database session for each test."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(override_get_db):
    """Create a test client for API tests."""
    from fastapi.testclient import TestClient

    from cadastro_alunos.db import get_db
    from cadastro_alunos.main import app

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


class SpyAlunoRepository:
    """Records every repository call; queries return empty results."""

    def __init__(self):
        self.calls = []

    def find_by_id(self, registro):
        self.calls.append(("find_by_id", (registro,)))
        return None

    def find_by_apelido(self, apelido):
        self.calls.append(("find_by_apelido", (apelido,)))
        return None

    def find_all_by_materia_preferida(self, materia_preferida):
        self.calls.append(("find_all_by_materia_preferida", (materia_preferida,)))
        return []

    def find_all_by_materia_preferida_and_apelido(self, materia_preferida, apelido):
        self.calls.append(
            ("find_all_by_materia_preferida_and_apelido", (materia_preferida, apelido))
        )
        return []

    def find_all_by_data_da_matricula_after(self, data_da_matricula):
        self.calls.append(("find_all_by_data_da_matricula_after", (data_da_matricula,)))
        return []

    def save(self, aluno):
        self.calls.append(("save", (aluno,)))
        return aluno


@pytest.fixture
def spy_repository():
    return SpyAlunoRepository()


@pytest.fixture
def spy_client(spy_repository):
    """Test client whose routes and use case talk to the spy repository."""
    from fastapi.testclient import TestClient

    from cadastro_alunos.deps import get_aluno_repository
    from cadastro_alunos.main import app

    app.dependency_overrides[get_aluno_repository] = lambda: spy_repository

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_aluno(db_session):
    """Persist a student directly, bypassing the API."""
    contador = iter(range(1, 10_000))

    def _make(
        primeiro_nome="Test",
        sobrenome="Student",
        data_da_matricula=dt.date(2025, 2, 10),
        materia_preferida=None,
        apelido=None,
    ):
        n = next(contador)
        aluno = Aluno(
            registro=f"reg-{n:04d}",
            pessoa=Pessoa(primeiro_nome, sobrenome, f"{n:011d}"),
            data_da_matricula=data_da_matricula,
            materia_preferida=materia_preferida,
            apelido=apelido,
        )
        db_session.add(aluno)
        db_session.commit()
        db_session.refresh(aluno)
        return aluno

    return _make
