"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from slug.core.options import Options, is_alphanum_latin1, is_latin1


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "SLUG_"

KEEP_PREDICATES = {
    "alphanum": is_alphanum_latin1,
    "latin1":   is_latin1,
}


class Settings(BaseModel):
    separator:         str  = Field(default="-", description="String inserted between words")
    keep:              str  = Field(default="alphanum", pattern="^(alphanum|latin1)$",
                                    description="Character filter: alphanum (Latin-1 letters/digits) or latin1")
    lower_case:        bool = Field(default=True, description="Lower-case input before filtering")
    strip_apostrophes: bool = Field(default=True, description="Delete apostrophes before any other processing")

    def to_options(self) -> Options:
        """Build the pipeline Options these settings describe."""
        return Options(
            separator=self.separator,
            keep_if=KEEP_PREDICATES[self.keep],
            lower_case=self.lower_case,
            strip_apostrophes=self.strip_apostrophes,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then SLUG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
