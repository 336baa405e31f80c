"""Base model configuration for decoded runner output."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model with standard configuration.

    Unknown keys written by the PhantomJS script are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
