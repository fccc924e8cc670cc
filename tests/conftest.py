"""
Pytest configuration and shared fixtures
"""
import os

# Settings are read once at import time, so the test environment goes first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-minimum-32-chars-long"
os.environ["AI_PROVIDER"] = "gemini"
os.environ["GEMINI_API_KEY"] = ""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from organiza.main import app
from organiza.application.services.auth_service import AUTHORIZED, create_access_token, create_user
from organiza.config import get_settings
from organiza.domain.models.client import Client
from organiza.domain.models.project import Payment, Project
from organiza.domain.models.visit import Visit
from organiza.infrastructure.database import Base, SessionLocal, engine
from organiza.infrastructure.repositories.client_repository import SQLAlchemyClientRepository
from organiza.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from organiza.infrastructure.repositories.visit_repository import SQLAlchemyVisitRepository


@pytest.fixture
def db():
    """Fresh in-memory database per test"""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def repos(db):
    """Repositories bound to the test session"""
    return SimpleNamespace(
        clients=SQLAlchemyClientRepository(db, Client),
        visits=SQLAlchemyVisitRepository(db, Visit),
        projects=SQLAlchemyProjectRepository(db, Project),
    )


@pytest.fixture
def make_client(db):
    def _make(name="Ana Silva", phone="11999998888", address="Rua das Flores, 123", **extra):
        client = Client(name=name, phone=phone, address=address, **extra)
        db.add(client)
        db.commit()
        db.refresh(client)
        return client
    return _make


@pytest.fixture
def make_visit(db):
    def _make(client, when, status="pendente", summary="Avaliação do closet"):
        visit = Visit(client_id=client.id, date=when, status=status, summary=summary, photos=[])
        db.add(visit)
        db.commit()
        db.refresh(visit)
        return visit
    return _make


@pytest.fixture
def make_project(db):
    def _make(client, start, end, payments=(("1500", "pago"),), value=None, status="Em andamento", name="Organização do closet"):
        rows = [Payment(amount=Decimal(amount), status=payment_status, due_date=end) for amount, payment_status in payments]
        project = Project(
            client_id=client.id,
            name=name,
            status=status,
            start_date=start,
            end_date=end,
            value=Decimal(value) if value is not None else sum(p.amount for p in rows),
            payment_method="vista" if len(rows) == 1 else "parcelado",
            photos_before=[],
            photos_after=[],
            payments=rows,
        )
        db.add(project)
        db.commit()
        db.refresh(project)
        return project
    return _make


@pytest.fixture
def ana(make_client):
    return make_client("Ana Silva")


@pytest.fixture
def ana_project(make_project, ana):
    """Project A: 2024-07-01..2024-07-15, value 1500, paid in full"""
    return make_project(ana, date(2024, 7, 1), date(2024, 7, 15))


@pytest.fixture
def client(db):
    """HTTP client without lifespan; tables come from the db fixture"""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db):
    settings = get_settings()
    return create_user(
        db, name="Admin", email=settings.DEFAULT_ADMIN_EMAIL, password="admin123",
        role="administrador", status=AUTHORIZED,
    )


@pytest.fixture
def auth_headers(admin_user):
    token = create_access_token({"sub": admin_user.email, "role": admin_user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def api_client(client, auth_headers):
    """Authenticated HTTP client acting as the administrator"""
    client.headers.update(auth_headers)
    return client

