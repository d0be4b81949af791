"""mdslack configuration management."""

import logging

from pydantic_settings import BaseSettings
from pydantic import Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger("mdslack.config")


class MdslackSettings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    # Image liveness probe
    probe_timeout: float = Field(default=10.0, description="Seconds before an image probe counts as unreachable")
    probe_user_agent: str = Field(
        default="Mozilla/5.0 (compatible; mdslack/1.0)",
        description="User-Agent sent with image probes",
    )
    follow_redirects: bool = Field(default=True, description="Follow redirects when probing images")

    model_config = {"env_prefix": "MDSLACK_", "env_file": ".env", "extra": "ignore"}


def load_settings(**overrides) -> MdslackSettings:
    """Load settings from environment, applying explicit overrides on top."""
    try:
        settings = MdslackSettings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        raise ConfigError(f"Invalid mdslack settings: {e}") from e

    if settings.probe_timeout <= 0:
        logger.warning(
            f"probe_timeout={settings.probe_timeout} disables the probe deadline; "
            "slow image hosts will stall the conversion"
        )

    return settings
