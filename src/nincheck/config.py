from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional
import yaml
from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# ---- Policy (how strict validation is) ----
class Policy(BaseModel):
    production: bool = True         # synthetic test numbers are rejected in production
    strict_calendar: bool = False   # reject Feb 29 in non-leap years


# ---- Logging (CLI only; the library just emits stdlib records) ----
class LoggingConfig(BaseModel):
    level: LogLevel = "WARNING"
    json_output: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}


# ---- Root config ----
class NinCheckConfig(BaseModel):
    policy: Policy = Field(default_factory=Policy)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ---- Loader ----
def load_config(path: Optional[Path]) -> NinCheckConfig:
    if not path:
        return NinCheckConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
    return NinCheckConfig(**data)
