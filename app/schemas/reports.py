from pydantic import BaseModel, ConfigDict


class EventAnalyticsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    capacity: int
    tickets_sold: int
