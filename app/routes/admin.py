from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.admin import require_admin
from app.core.exceptions import EventNotFoundError
from app.database.db import get_db
from app.schemas.events import EventCreate, EventOut, EventUpdate
from app.schemas.reports import EventAnalyticsOut
from app.services.events import create_event, get_event_analytics, update_event

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/events", response_model=EventOut, status_code=201)
def add_event(payload: EventCreate, db: Session = Depends(get_db)):
    if payload.missing_required():
        raise HTTPException(status_code=400, detail="Bad Request: Missing required event fields.")

    return create_event(
        db,
        name=payload.name,
        venue=payload.venue,
        start_time=payload.start_time,
        end_time=payload.end_time,
        capacity=payload.capacity,
    )


@router.put("/events/{event_id}", response_model=EventOut)
def edit_event(event_id: int, payload: EventUpdate, db: Session = Depends(get_db)):
    changes = payload.changes()
    if not changes:
        raise HTTPException(status_code=400, detail="Bad Request: No fields to update.")

    try:
        return update_event(db, event_id, changes)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/analytics", response_model=list[EventAnalyticsOut])
def analytics(db: Session = Depends(get_db)):
    """Per-event capacity and tickets sold."""
    return get_event_analytics(db)
