import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import Engine, StaticPool, create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.orm.session import Session  # noqa: E402

from app.core.clock import get_now  # noqa: E402
from app.core.exceptions import (  # noqa: E402
    BookingNotFoundError,
    InsufficientCapacityError,
    ProcedureError,
)
from app.database import procedures  # noqa: E402
from app.database.db import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models.books import Booking  # noqa: E402
from app.models.events import Event  # noqa: E402
from app.models.users import User  # noqa: F401, E402

FIXED_NOW = datetime(2030, 6, 1, 12, 0, tzinfo=timezone.utc)

# Use an in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine: Engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeProcedures:
    """In-process stand-in for the stored procedures, honouring the same contract."""

    def __init__(self):
        self.calls: list[tuple] = []

    def book_tickets_atomic(self, db: Session, *, user_id: int, event_id: int, tickets: int) -> None:
        self.calls.append(("book_tickets_atomic", user_id, event_id, tickets))
        event = db.get(Event, event_id)
        if event is None:
            raise ProcedureError(f"Event {event_id} does not exist")
        if event.tickets_sold + tickets > event.capacity:
            raise InsufficientCapacityError()
        event.tickets_sold += tickets
        db.add(Booking(user_id=user_id, event_id=event_id, tickets_booked=tickets))
        db.commit()

    def cancel_booking_by_post(self, db: Session, *, booking_id: int, user_id: int) -> None:
        self.calls.append(("cancel_booking_by_post", booking_id, user_id))
        booking = db.get(Booking, booking_id)
        if booking is None or booking.user_id != user_id:
            raise BookingNotFoundError()
        booking.event.tickets_sold -= booking.tickets_booked
        booking.tickets_booked = 0
        db.commit()


@pytest.fixture(autouse=True)
def setup_database():
    """Give every test empty tables."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db: Session = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def fake_procedures(monkeypatch: pytest.MonkeyPatch) -> FakeProcedures:
    fake = FakeProcedures()
    monkeypatch.setattr(procedures, "book_tickets_atomic", fake.book_tickets_atomic)
    monkeypatch.setattr(procedures, "cancel_booking_by_post", fake.cancel_booking_by_post)
    return fake


# Override the database dependency
def override_get_db():
    db: Session = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(fake_procedures):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_event(db_session: Session):
    """Insert an event starting `days` after FIXED_NOW and return it."""

    def _make(name="Concert", *, days=10, capacity=100, tickets_sold=0, venue="Main Hall"):
        start = FIXED_NOW + timedelta(days=days)
        event = Event(
            name=name,
            venue=venue,
            start_time=start,
            end_time=start + timedelta(hours=3),
            capacity=capacity,
            tickets_sold=tickets_sold,
        )
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)
        return event

    return _make


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
