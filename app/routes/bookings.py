import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.exceptions import BookingNotFoundError, InsufficientCapacityError, ProcedureError
from app.database.db import get_db
from app.schemas.books import BookingOut, BookRequest, CancelRequest
from app.schemas.common import MessageOut
from app.services.bookings import cancel_booking, create_booking, list_user_bookings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.post("", response_model=MessageOut, status_code=201)
def book_tickets(payload: BookRequest, db: Session = Depends(get_db)):
    if payload.missing("user", "event_id", "tickets_to_book"):
        raise HTTPException(
            status_code=400,
            detail="Bad Request: Missing user, event_id, or tickets_to_book.",
        )

    try:
        create_booking(
            db,
            user=payload.user,
            event_id=payload.event_id,
            tickets_to_book=payload.tickets_to_book,
        )
    except InsufficientCapacityError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except ProcedureError as e:
        logger.warning("booking failed", extra={"event_id": payload.event_id, "error": e.message})
        raise HTTPException(status_code=400, detail={"message": "Booking failed.", "error": e.message})

    return {"message": "Booking created successfully."}


# declared before /{user} so "cancel" is never read as a user name on GET
@router.post("/cancel", response_model=MessageOut)
def cancel(payload: CancelRequest, db: Session = Depends(get_db)):
    if payload.missing("booking_id", "user"):
        raise HTTPException(
            status_code=400,
            detail="Bad Request: Missing booking_id or user in request body.",
        )

    try:
        cancel_booking(db, user=payload.user, booking_id=payload.booking_id)
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ProcedureError as e:
        raise HTTPException(
            status_code=400,
            detail={"message": "Booking cancellation failed.", "error": e.message},
        )

    return {"message": "Booking cancelled successfully."}


@router.get("/{user}", response_model=list[BookingOut])
def booking_history(user: str, db: Session = Depends(get_db)):
    return list_user_bookings(db, user)
