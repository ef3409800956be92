"""
YAML loader utility for ClassTabs.

Loads the sidebar page list and the class roster from YAML files.
"""

from pathlib import Path
from typing import Any
import yaml

from classtabs.schemas import PageInfo, RosterClass


def load_yaml(file_path: Path) -> Any:
    """
    Load a YAML document.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_pages(file_path: Path) -> list[PageInfo]:
    """
    Load sidebar pages.

    Expected layout:
        pages:
          - key: explore
            label: Discover
            icon: "🧭"

    Returns:
        Pages in file order
    """
    data = load_yaml(file_path) or {}
    return [PageInfo(**entry) for entry in data.get("pages", [])]


def load_roster(file_path: Path) -> list[RosterClass]:
    """
    Load the class roster.

    Expected layout:
        classes:
          - id: 5a
            name: Class 5A
            students:
              - id: s001
                name: Alice Wong
    """
    data = load_yaml(file_path) or {}
    return [RosterClass(**entry) for entry in data.get("classes", [])]
