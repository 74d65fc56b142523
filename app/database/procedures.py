"""
Calls into the stored procedures that own booking atomicity.

Both procedures live in the database (see sql/schema.sql). They signal
expected refusals with dedicated SQLSTATE codes, which are mapped to domain
exceptions here so callers never inspect driver errors themselves.
"""
import logging

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    BookingNotFoundError,
    InsufficientCapacityError,
    ProcedureError,
    TicketingError,
)

logger = logging.getLogger(__name__)

INSUFFICIENT_CAPACITY = "TB409"
BOOKING_NOT_FOUND = "TB404"

_ERRORS_BY_SQLSTATE: dict[str, type[TicketingError]] = {
    INSUFFICIENT_CAPACITY: InsufficientCapacityError,
    BOOKING_NOT_FOUND: BookingNotFoundError,
}


def sqlstate_of(exc: DBAPIError) -> str | None:
    """Return the SQLSTATE carried by the driver error, if any."""
    orig = exc.orig
    # psycopg 3 exposes `sqlstate`, psycopg2 exposes `pgcode`
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def translate_error(procedure: str, exc: DBAPIError) -> TicketingError:
    code = sqlstate_of(exc)
    error_cls = _ERRORS_BY_SQLSTATE.get(code or "")
    if error_cls is not None:
        return error_cls()
    return ProcedureError(f"{procedure} failed: {exc.orig}")


def _call(db: Session, procedure: str, params: dict) -> None:
    placeholders = ", ".join(f":{name}" for name in params)
    try:
        db.execute(text(f"SELECT {procedure}({placeholders})"), params)
        db.commit()
    except DBAPIError as exc:
        db.rollback()
        logger.warning(
            "procedure call failed",
            extra={"procedure": procedure, "sqlstate": sqlstate_of(exc)},
        )
        raise translate_error(procedure, exc) from exc


def book_tickets_atomic(db: Session, *, user_id: int, event_id: int, tickets: int) -> None:
    """Book `tickets` for the user, raising InsufficientCapacityError when sold out."""
    _call(
        db,
        "book_tickets_atomic",
        {"p_user_id": user_id, "p_event_id": event_id, "p_tickets_to_book": tickets},
    )


def cancel_booking_by_post(db: Session, *, booking_id: int, user_id: int) -> None:
    """Zero out a booking owned by the user, raising BookingNotFoundError otherwise."""
    _call(
        db,
        "cancel_booking_by_post",
        {"p_booking_id": booking_id, "p_user_id": user_id},
    )
