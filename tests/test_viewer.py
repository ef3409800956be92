"""
Tab strip rendering tests.
"""

import pytest

from classtabs.schemas import HOME
from classtabs.navigation import (
    InMemoryRouter,
    InMemoryStore,
    TabNavigator,
    TabPersistence,
    classroom_key,
    page_key,
)
from classtabs.viewer import (
    breadcrumb_trail,
    build_tab_chips,
    get_tabstrip_css,
    render_breadcrumbs,
    render_tab_strip,
)


@pytest.fixture
def nav():
    return TabNavigator(
        InMemoryRouter(),
        TabPersistence(InMemoryStore()),
        page_labels={"classroom": "My Classes", "explore": "Discover"},
    )


class TestTabChips:

    def test_home_first_and_not_closable(self, nav):
        nav.navigate(page_key("explore"))
        chips = build_tab_chips(nav)
        assert chips[0].key == HOME
        assert not chips[0].closable
        assert [c.label for c in chips] == ["Home", "Discover"]

    def test_active_and_drag_over(self, nav):
        nav.open_classroom("5a", "Class 5A")
        nav.navigate(page_key("explore"))
        nav.set_drag_over(classroom_key("5a"))
        chips = {c.label: c for c in build_tab_chips(nav)}
        assert chips["Discover"].active
        assert chips["Class 5A"].drag_over
        assert not chips["Class 5A"].active

    def test_render_escapes_labels(self, nav):
        nav.open_classroom("5a", "<b>5A</b>")
        html = render_tab_strip(nav)
        assert "&lt;b&gt;5A&lt;/b&gt;" in html
        assert 'data-tab-key="classroom/5a"' in html
        assert "tab-chip active" in html

    def test_css(self):
        assert ".tab-strip" in get_tabstrip_css()


class TestBreadcrumbs:

    def test_home(self, nav):
        assert breadcrumb_trail(nav) == [("Home", HOME)]

    def test_nested_student(self, nav):
        nav.open_classroom("5a", "Class 5A")
        nav.open_student_from_class("5a", "Alice Wong")
        labels = [label for label, _ in breadcrumb_trail(nav)]
        assert labels == ["Home", "My Classes", "Class 5A", "Alice Wong"]

    def test_classroom(self, nav):
        nav.open_classroom("5a", "Class 5A")
        labels = [label for label, _ in breadcrumb_trail(nav)]
        assert labels == ["Home", "My Classes", "Class 5A"]

    def test_render(self, nav):
        nav.navigate(page_key("explore"))
        html = render_breadcrumbs(breadcrumb_trail(nav))
        assert '<span class="crumb-current">Discover</span>' in html
