"""
Runtime configuration for ClassTabs.

Settings are read from CLASSTABS_* environment variables, after loading
a .env file if one is present.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


ENV_PREFIX = "CLASSTABS_"

# Project root (the directory holding pages/ and data/)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseModel):
    # Session storage slot names
    open_tabs_slot: str = "openTabs"
    classroom_labels_slot: str = "classroomTabs"
    student_labels_slot: str = "studentProfileTabs"

    # YAML sources
    pages_file: Path = PROJECT_ROOT / "pages" / "pages.yaml"
    roster_file: Path = PROJECT_ROOT / "data" / "roster.yaml"

    log_level: str = Field(default="INFO", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_file: Optional .env path (default: search from the working directory)

    Returns:
        Settings with any CLASSTABS_<FIELD> overrides applied
    """
    load_dotenv(env_file)

    overrides = {}
    for name in Settings.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value:
            overrides[name] = value.upper() if name == "log_level" else value
    return Settings(**overrides)
