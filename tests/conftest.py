from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from app.core.config import Settings
from app.core.database import Base, Database
from app.main import create_app
from app.models import BookingHour, Court


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
    )


@pytest.fixture
def session_factory(tmp_path):
    """Sync sessions on the same sqlite file the app talks to, for seeding and checks."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


def build_client(settings):
    database = Database(settings.database_url, poolclass=NullPool)
    return TestClient(create_app(settings, database))


@pytest.fixture
def make_client():
    return build_client


@pytest.fixture
def client(settings, session_factory):
    with build_client(settings) as c:
        yield c


@pytest.fixture
def add_court(session_factory):
    def _add(name, is_active=True, description=None):
        with session_factory() as db:
            court = Court(name=name, description=description, is_active=is_active)
            db.add(court)
            db.commit()
            return court.id
    return _add


@pytest.fixture
def add_booking_hour(session_factory, add_court):
    def _add(court_id=None, start=datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)):
        if court_id is None:
            court_id = add_court(f"Court for {start.isoformat()}")
        with session_factory() as db:
            booking = BookingHour(court_id=court_id, date_start=start, date_end=start + timedelta(hours=1))
            db.add(booking)
            db.commit()
            return booking.id
    return _add


@pytest.fixture
def count_rows(session_factory):
    def _count(model, **filters):
        with session_factory() as db:
            return db.query(model).filter_by(**filters).count()
    return _count
