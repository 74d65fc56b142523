from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.schemas.common import RequestBody


class BookRequest(RequestBody):
    event_id: int | None = None
    tickets_to_book: int | None = None


class CancelRequest(RequestBody):
    booking_id: int | None = None


class BookedEventOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    venue: str
    start_time: datetime


class BookingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime | None
    tickets_booked: int
    event: BookedEventOut | None
