from pydantic import BaseModel, ConfigDict


class CurrentUser(BaseModel):
    """Identity attached to a request once its bearer token is validated."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    email: str
