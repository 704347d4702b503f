import os

# Point the module-level engine at SQLite before the app is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import campus_grievance.api.v1.route as route_module
from campus_grievance.db import models  # noqa: F401
from campus_grievance.db.session import Base
from campus_grievance.main import app
from campus_grievance.model.actor.actor_context import ActorContext, Role
from campus_grievance.service.grievance.grievance import GrievanceService
from campus_grievance.service.grievance.status_workflow import StatusWorkflow


@pytest.fixture(scope="function")
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)
    yield factory
    engine.dispose()


@pytest.fixture(scope="function")
def service(session_factory):
    return GrievanceService(workflow=StatusWorkflow(), session_factory=session_factory, verify_assignee=False)


#scope : function < class < module < package < session
@pytest.fixture(scope="function")
def client(service, monkeypatch):
    monkeypatch.setattr(route_module, "grievance_service", service)
    return TestClient(app)


@pytest.fixture
def student():
    return ActorContext(id="S1", role=Role.STUDENT)


@pytest.fixture
def other_student():
    return ActorContext(id="S2", role=Role.STUDENT)


@pytest.fixture
def faculty():
    return ActorContext(id="F1", role=Role.FACULTY)


@pytest.fixture
def authority():
    return ActorContext(id="A1", role=Role.AUTHORITY)


@pytest.fixture
def other_authority():
    return ActorContext(id="A2", role=Role.AUTHORITY)


@pytest.fixture
def admin():
    return ActorContext(id="ADM", role=Role.ADMIN)
