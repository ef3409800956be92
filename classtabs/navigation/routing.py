"""
Router collaborator - turns tab paths into URL changes and back.

The navigator only needs two operations, so any router (browser history,
Streamlit query params, a test double) can stand in.
"""

from typing import Optional, Protocol


class Router(Protocol):
    def current_path_segments(self) -> list[str]: ...

    def push_path(self, path: str) -> None: ...


class InMemoryRouter:
    """Router that records pushed paths instead of touching a browser."""

    def __init__(self, path: str = "/"):
        self.path = path
        self.history: list[str] = []

    def current_path_segments(self) -> list[str]:
        return [s for s in self.path.split('/') if s]

    def push_path(self, path: str) -> None:
        self.path = path
        self.history.append(path)

    def visit(self, path: str):
        """Simulate the URL changing outside the app (bookmark, back/forward)."""
        self.path = path

    @property
    def last_pushed(self) -> Optional[str]:
        return self.history[-1] if self.history else None
