"""ClassTabs - hierarchical tab navigation for a school administration front end."""

__version__ = "0.1.0"
