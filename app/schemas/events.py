from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.schemas.common import RequestBody


class EventCreate(RequestBody):
    name: str | None = None
    venue: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    capacity: int | None = None

    def missing_required(self) -> list[str]:
        missing = self.missing("name", "venue", "start_time", "end_time")
        # zero is a legitimate capacity, only absence counts
        if self.capacity is None:
            missing.append("capacity")
        return missing


class EventUpdate(EventCreate):
    def changes(self) -> dict:
        """Fields to write: truthy strings/timestamps, capacity whenever given."""
        fields = {
            name: getattr(self, name)
            for name in ("name", "venue", "start_time", "end_time")
            if getattr(self, name)
        }
        if self.capacity is not None:
            fields["capacity"] = self.capacity
        return fields


class EventOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    venue: str
    start_time: datetime
    end_time: datetime
    capacity: int
    tickets_sold: int
