"""Account model for the credential directory."""

from pydantic import BaseModel, Field


class Account(BaseModel):
    """A registered user account."""

    model_config = {"frozen": True}

    username: str
    password: str = Field(repr=False)  # Stored verbatim, kept out of repr/logs
