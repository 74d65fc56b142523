from pydantic import BaseModel, ConfigDict


class RequestBody(BaseModel):
    """Request payload whose fields are all optional so presence is checked by hand.

    Missing fields are reported as 400 rather than FastAPI's 422.
    """

    model_config = ConfigDict(extra="ignore")

    user: str | None = None

    def missing(self, *names: str) -> list[str]:
        """Names of the given fields that are absent or falsy."""
        return [name for name in names if not getattr(self, name)]


class MessageOut(BaseModel):
    message: str
