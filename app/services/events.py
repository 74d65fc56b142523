from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.exceptions import EventNotFoundError
from app.models.events import Event


def list_upcoming_events(db: Session, *, now: datetime) -> list[Event]:
    """Events that have not started yet, soonest first."""
    stmt = select(Event).where(Event.start_time > now).order_by(Event.start_time.asc())
    return list(db.scalars(stmt))


def get_event(db: Session, event_id: int) -> Event:
    event = db.get(Event, event_id)
    if event is None:
        raise EventNotFoundError()
    return event


def create_event(
    db: Session,
    *,
    name: str,
    venue: str,
    start_time: datetime,
    end_time: datetime,
    capacity: int,
) -> Event:
    event = Event(
        name=name,
        venue=venue,
        start_time=start_time,
        end_time=end_time,
        capacity=capacity,
        tickets_sold=0,
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def update_event(db: Session, event_id: int, changes: dict) -> Event:
    event = get_event(db, event_id)
    for field, value in changes.items():
        setattr(event, field, value)
    db.commit()
    db.refresh(event)
    return event


def get_event_analytics(db: Session) -> list[dict]:
    """Capacity and sold counters for every event."""
    rows = db.execute(select(Event.id, Event.name, Event.capacity, Event.tickets_sold))
    return [dict(row) for row in rows.mappings()]
