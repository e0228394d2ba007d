from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_SUITE_NAME = "Unnamed Suite"


class ColorMode(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class SuiteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = DEFAULT_SUITE_NAME
    color: ColorMode = ColorMode.AUTO
    debug_log: str | None = None
    verbose: bool = False

    @field_validator("debug_log")
    @classmethod
    def expand_debug_log(cls, v: str | None) -> str | None:
        """Expand ${VAR} references, failing on unset variables without defaults."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(
                f"debug_log '{v}' references a missing environment variable: {e}"
            ) from e

    @property
    def echo_color(self) -> bool | None:
        """Color flag for typer.echo: None lets it detect a terminal."""
        if self.color is ColorMode.ALWAYS:
            return True
        if self.color is ColorMode.NEVER:
            return False
        return None

    @property
    def debug_log_path(self) -> Path | None:
        return Path(self.debug_log) if self.debug_log else None


def load_config(path: Path) -> SuiteConfig:
    """Load and validate a suite config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = SuiteConfig(**raw)

    # Resolve a relative debug log path against the config file location
    if config.debug_log:
        log_path = Path(config.debug_log)
        if not log_path.is_absolute():
            config.debug_log = str((config_dir / log_path).resolve())

    return config
