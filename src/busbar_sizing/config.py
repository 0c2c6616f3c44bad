"""
Application settings.

Defaults live on the model; a JSON settings file overrides them and
BUSBAR_* environment variables override both. Engineering constants are
not settings: they are fixed in the sizing package.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional, Tuple, Type

from pydantic import Field, PositiveFloat, conint, field_validator
from pydantic_settings import BaseSettings, NoDecode, PydanticBaseSettingsSource, SettingsConfigDict

ENV_PREFIX = "BUSBAR_"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, frozen=True, extra="forbid")

    log_level: str = Field("INFO", description="Root logging level.")
    log_dir: Optional[str] = Field(None, description="Directory for rotating log files (disabled when unset).")
    api_host: str = Field("127.0.0.1", description="Bind address for the HTTP API.")
    api_port: conint(ge=1, le=65535) = Field(8000, description="Port for the HTTP API.")
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Origins allowed to call the API from a browser (comma-separated in the environment).",
    )
    default_simulation_duration: PositiveFloat = Field(
        1.0, le=10.0, description="Short-circuit simulation duration used when a request omits it (s)."
    )
    default_time_steps: conint(ge=10, le=1000) = Field(
        100, description="Short-circuit simulation time steps used when a request omits them."
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [o.strip() for o in value.split(",") if o.strip()]
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Environment first: it overrides values loaded from a settings file.
        return env_settings, init_settings


def load_settings(path: Optional[str | Path] = None) -> AppSettings:
    """
    Build settings from defaults, an optional JSON file and the environment.

    Raises:
        FileNotFoundError: if ``path`` is given but does not exist
        pydantic.ValidationError: if any merged value is invalid
    """
    data: Dict[str, Any] = {}
    if path is not None:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        data.update(json.loads(p.read_text()))

    return AppSettings(**data)
