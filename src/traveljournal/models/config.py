"""Configuration models for traveljournal."""

from typing import Optional

from pydantic import BaseModel, Field, HttpUrl


class APIConfig(BaseModel):
    """Configuration for the Travel Journal API connection."""

    base_url: HttpUrl = Field(
        default="http://localhost:5000/api",
        description="API root, including the /api prefix"
    )

    access_token: Optional[str] = Field(
        default=None,
        description="Bearer token forwarded on every request when set"
    )

    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds"
    )

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for traveljournal.

    Built by ``traveljournal.config.load_config`` from the YAML file and
    TRAVELJOURNAL_* environment overrides.
    """

    api: APIConfig = Field(default_factory=APIConfig, description="API settings")

    model_config = {"frozen": True}
