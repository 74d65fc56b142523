class TicketingError(Exception):
    """Base class for failures the API reports with a specific status code."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EventNotFoundError(TicketingError):
    status_code = 404
    default_message = "Event not found."


class BookingNotFoundError(TicketingError):
    status_code = 404
    default_message = "Booking not found or not owned by user."


class InsufficientCapacityError(TicketingError):
    status_code = 409
    default_message = "Conflict: Not enough tickets available or event is sold out."


class ProcedureError(TicketingError):
    """A stored procedure failed for a reason other than the ones above."""

    status_code = 400
    default_message = "Stored procedure call failed."
