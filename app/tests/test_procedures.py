"""
Test the stored procedure adapter's error mapping.
"""
import pytest
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session

from app.core.exceptions import BookingNotFoundError, InsufficientCapacityError, ProcedureError
from app.database import procedures
from app.models.events import Event


class _DriverError(Exception):
    def __init__(self, message: str, *, pgcode: str | None = None, sqlstate: str | None = None):
        super().__init__(message)
        if pgcode is not None:
            self.pgcode = pgcode
        if sqlstate is not None:
            self.sqlstate = sqlstate


def _dbapi_error(**kwargs) -> DBAPIError:
    return DBAPIError("SELECT book_tickets_atomic(...)", {}, _DriverError("raised", **kwargs))


class TestTranslateError:

    def test_capacity_code_maps_to_conflict(self):
        error = procedures.translate_error("book_tickets_atomic", _dbapi_error(pgcode="TB409"))
        assert isinstance(error, InsufficientCapacityError)
        assert error.status_code == 409

    def test_not_found_code_maps_to_booking_not_found(self):
        error = procedures.translate_error("cancel_booking_by_post", _dbapi_error(sqlstate="TB404"))
        assert isinstance(error, BookingNotFoundError)
        assert error.status_code == 404

    def test_psycopg3_sqlstate_is_read(self):
        assert procedures.sqlstate_of(_dbapi_error(sqlstate="TB409")) == "TB409"

    def test_psycopg2_pgcode_is_read(self):
        assert procedures.sqlstate_of(_dbapi_error(pgcode="TB404")) == "TB404"

    def test_message_text_is_not_used_for_classification(self):
        """A generic raise mentioning capacity is still a plain procedure failure."""
        exc = DBAPIError("SELECT 1", {}, _DriverError("Not enough tickets available", pgcode="P0001"))
        error = procedures.translate_error("book_tickets_atomic", exc)
        assert type(error) is ProcedureError
        assert error.status_code == 400

    def test_missing_code_is_procedure_error(self):
        error = procedures.translate_error("book_tickets_atomic", _dbapi_error())
        assert type(error) is ProcedureError
        assert "book_tickets_atomic failed" in error.message


class TestProcedureCalls:
    """SQLite has no stored procedures, so real calls exercise the failure path."""

    def test_book_raises_procedure_error_and_rolls_back(self, db_session: Session, make_event):
        event = make_event(capacity=5)

        with pytest.raises(ProcedureError, match="no such function"):
            procedures.book_tickets_atomic(db_session, user_id=1, event_id=event.id, tickets=1)

        # the session is usable again after the rollback
        assert db_session.get(Event, event.id).tickets_sold == 0

    def test_cancel_raises_procedure_error(self, db_session: Session):
        with pytest.raises(ProcedureError):
            procedures.cancel_booking_by_post(db_session, booking_id=1, user_id=1)
