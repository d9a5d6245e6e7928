"""Runtime settings resolved from command-line flags and the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .services import DEFAULT_RESOURCE

DATA_DIR_ENV = "BUDGET_TRACKER_DATA_DIR"
LOG_LEVEL_ENV = "BUDGET_TRACKER_LOG_LEVEL"

DEFAULT_DATA_DIR = Path("data")
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    resource: str = DEFAULT_RESOURCE
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def data_file(self) -> Path:
        return self.data_dir / self.resource


def load_settings(
    data_dir: Optional[Path] = None,
    log_level: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Command-line values win over environment variables, which win over defaults."""
    env = os.environ if environ is None else environ
    resolved_dir = data_dir or env.get(DATA_DIR_ENV) or DEFAULT_DATA_DIR
    resolved_level = (log_level or env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    return Settings(data_dir=Path(resolved_dir), log_level=resolved_level)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
