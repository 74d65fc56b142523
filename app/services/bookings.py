import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from app.database import procedures
from app.models.books import Booking
from app.services.users import get_user_id

logger = logging.getLogger(__name__)


def create_booking(db: Session, *, user: str, event_id: int, tickets_to_book: int) -> None:
    """
    Book tickets for `user`.

    The capacity check and the tickets_sold increment happen inside the
    book_tickets_atomic procedure; InsufficientCapacityError and
    ProcedureError propagate from there.
    """
    user_id = get_user_id(db, user)
    procedures.book_tickets_atomic(db, user_id=user_id, event_id=event_id, tickets=tickets_to_book)
    logger.info(
        "booking created",
        extra={"user_id": user_id, "event_id": event_id, "tickets": tickets_to_book},
    )


def list_user_bookings(db: Session, user: str) -> list[Booking]:
    """Booking history for `user`, newest first."""
    user_id = get_user_id(db, user)
    stmt = (
        select(Booking)
        .options(joinedload(Booking.event))
        .where(Booking.user_id == user_id)
        .order_by(Booking.created_at.desc(), Booking.id.desc())
    )
    return list(db.scalars(stmt))


def cancel_booking(db: Session, *, user: str, booking_id: int) -> None:
    """Cancel a booking owned by `user`; BookingNotFoundError if it is not theirs."""
    user_id = get_user_id(db, user)
    procedures.cancel_booking_by_post(db, booking_id=booking_id, user_id=user_id)
    logger.info("booking cancelled", extra={"user_id": user_id, "booking_id": booking_id})
