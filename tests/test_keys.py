"""
Tab key model tests: slugs, constructors, predicates and parsing.
"""

import pytest

from classtabs.schemas import HOME, TabKind
from classtabs.navigation import (
    InvalidTabKeyError,
    classroom_key,
    is_classroom_scoped,
    is_closable,
    is_student_scoped,
    key_to_path,
    nested_student_key,
    page_key,
    parse_segments,
    parse_tab_key,
    path_to_key,
    slugify,
    student_key,
    title_from_slug,
)


class TestSlugify:

    def test_lowercases_and_hyphenates(self):
        assert slugify("Alice Wong") == "alice-wong"

    def test_collapses_whitespace_runs(self):
        assert slugify("Tan  Wei\tJie") == "tan-wei-jie"

    def test_collision_is_possible(self):
        assert slugify("Alice Wong") == slugify("alice   WONG")

    def test_slash_becomes_hyphen(self):
        assert slugify("AC/DC") == "ac-dc"
        assert slugify("Tan Wei Jie / Jay") == "tan-wei-jie-jay"

    @pytest.mark.parametrize("name", ["", "   ", "/", " / "])
    def test_empty_name_gets_placeholder(self, name):
        slug = slugify(name)
        assert slug
        assert "/" not in slug
        assert student_key(name).student_slug == slug

    def test_slug_is_a_single_segment(self):
        key = nested_student_key("5a", "Mary-Jane O/Neil")
        assert key.student_slug == "mary-jane-o-neil"
        assert path_to_key(key_to_path(key)) == key


class TestConstructors:

    def test_classroom_key(self):
        assert str(classroom_key("5a")) == "classroom/5a"

    def test_classroom_key_is_injective(self):
        assert classroom_key("5a") != classroom_key("5b")

    def test_student_key(self):
        assert str(student_key("Alice Wong")) == "student/alice-wong"

    def test_nested_student_key(self):
        key = nested_student_key("5a", "Alice Wong")
        assert str(key) == "classroom/5a/student/alice-wong"
        assert key.kind == TabKind.CLASS_STUDENT

    def test_same_inputs_same_key(self):
        assert nested_student_key("5a", "Alice Wong") == nested_student_key("5a", "Alice Wong")

    def test_student_id_disambiguates(self):
        a = student_key("Alice Wong", student_id="s001")
        b = student_key("Alice Wong", student_id="s099")
        assert str(a) == "student/alice-wong-s001"
        assert a != b


class TestPredicates:

    def test_only_home_is_not_closable(self):
        assert not is_closable(HOME)
        assert is_closable(page_key("explore"))
        assert is_closable(classroom_key("5a"))

    def test_classroom_scoped(self):
        assert is_classroom_scoped(classroom_key("5a"))
        assert is_classroom_scoped(nested_student_key("5a", "Alice"))
        assert not is_classroom_scoped(student_key("Alice"))
        assert not is_classroom_scoped(page_key("classroom"))

    def test_student_scoped(self):
        assert is_student_scoped(student_key("Alice"))
        assert is_student_scoped(nested_student_key("5a", "Alice"))
        assert not is_student_scoped(classroom_key("5a"))

    def test_predicates_are_structural(self):
        # a class whose id happens to look like a student path segment
        key = classroom_key("student")
        assert not is_student_scoped(key)

    def test_title_from_slug(self):
        assert title_from_slug("aisha-rahman") == "Aisha Rahman"


class TestParsing:

    @pytest.mark.parametrize("text", [
        "explore",
        "daily-roundup",
        "classroom/5a",
        "classroom/5a/student/alice-wong",
        "student/alice-wong",
    ])
    def test_round_trips_through_string(self, text):
        assert str(parse_tab_key(text)) == text

    def test_home_and_empty(self):
        assert parse_tab_key("home") == HOME
        assert parse_tab_key("") == HOME
        assert parse_segments([]) == HOME

    @pytest.mark.parametrize("text", [
        "classroom/5a/extra",
        "classroom/5a/teacher/bob",
        "/explore",
        "explore/",
        "classroom//student",
        "Explore",
    ])
    def test_malformed(self, text):
        with pytest.raises(InvalidTabKeyError):
            parse_tab_key(text)

    def test_bare_segment_is_a_page(self):
        assert parse_tab_key("student").kind == TabKind.PAGE

    def test_non_string(self):
        with pytest.raises(InvalidTabKeyError):
            parse_tab_key(None)

    def test_invalid_error_is_value_error(self):
        assert issubclass(InvalidTabKeyError, ValueError)


class TestPaths:

    def test_home_path(self):
        assert key_to_path(HOME) == "/"
        assert path_to_key("/") == HOME

    def test_key_path(self):
        key = nested_student_key("5a", "Alice Wong")
        assert key_to_path(key) == "/classroom/5a/student/alice-wong"
        assert path_to_key(key_to_path(key)) == key
