"""ClassTabs utilities."""

from .loader import load_yaml, load_pages, load_roster

__all__ = ["load_yaml", "load_pages", "load_roster"]
