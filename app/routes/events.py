from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.clock import get_now
from app.core.exceptions import EventNotFoundError
from app.database.db import get_db
from app.schemas.events import EventOut
from app.services.events import get_event, list_upcoming_events

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=list[EventOut])
def upcoming_events(db: Session = Depends(get_db), now: datetime = Depends(get_now)):
    return list_upcoming_events(db, now=now)


@router.get("/{event_id}", response_model=EventOut)
def event_detail(event_id: int, db: Session = Depends(get_db)):
    try:
        return get_event(db, event_id)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
