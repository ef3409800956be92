"""
ClassTabs - School Administration Front End

Streamlit application with a browser-style tab strip: drill from
My Classes into a class, then into a student, without the strip growing,
with tabs surviving a page reload and staying in sync with the URL.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st

from classtabs.config import load_settings
from classtabs.navigation import (
    TabNavigator,
    TabPersistence,
    page_key,
)
from classtabs.navigation.session import QueryParamsRouter, StreamlitSessionStore
from classtabs.schemas import HOME, TabKind
from classtabs.utils import load_pages, load_roster
from classtabs.viewer import (
    breadcrumb_trail,
    get_tabstrip_css,
    render_breadcrumbs,
    render_tab_strip,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="ClassTabs",
    page_icon="🏫",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "pages" not in st.session_state:
        st.session_state.pages = load_pages(settings.pages_file)

    if "roster" not in st.session_state:
        if settings.roster_file.exists():
            st.session_state.roster = load_roster(settings.roster_file)
        else:
            logger.warning(f"Roster not found: {settings.roster_file}")
            st.session_state.roster = []

    if "navigator" not in st.session_state:
        page_labels = {page.key: page.label for page in st.session_state.pages}
        st.session_state.navigator = TabNavigator(
            QueryParamsRouter(),
            TabPersistence(StreamlitSessionStore(), settings),
            page_labels=page_labels,
        )


def find_class(class_id: str):
    for roster_class in st.session_state.roster:
        if roster_class.id == class_id:
            return roster_class
    return None


# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------

def render_sidebar(nav: TabNavigator):
    """Render page links and the class roster."""
    st.sidebar.title("🏫 ClassTabs")

    for page in st.session_state.pages:
        label = f"{page.icon} {page.label}" if page.icon else page.label
        st.sidebar.button(
            label,
            key=f"page_{page.key}",
            on_click=nav.navigate,
            args=(page_key(page.key),),
            use_container_width=True,
        )

    if not st.session_state.roster:
        return

    st.sidebar.divider()
    st.sidebar.subheader("Classes")
    for roster_class in st.session_state.roster:
        with st.sidebar.expander(roster_class.name):
            st.button(
                "Open class",
                key=f"class_{roster_class.id}",
                on_click=nav.open_classroom,
                args=(roster_class.id, roster_class.name),
                use_container_width=True,
            )
            for student in roster_class.students:
                st.button(
                    student.name,
                    key=f"sidebar_student_{roster_class.id}_{student.id}",
                    on_click=nav.open_student_from_class,
                    args=(roster_class.id, student.name, student.id),
                    use_container_width=True,
                )


# -----------------------------------------------------------------------------
# Tab Strip
# -----------------------------------------------------------------------------

def render_tabs(nav: TabNavigator):
    """Render the strip, then one activate/close control pair per open tab."""
    st.markdown(get_tabstrip_css(), unsafe_allow_html=True)
    st.markdown(render_tab_strip(nav), unsafe_allow_html=True)

    if not nav.open_tabs:
        return

    columns = st.columns(len(nav.open_tabs) + 1)
    with columns[0]:
        st.button(
            "Home",
            key="tab_home",
            on_click=nav.navigate,
            args=(HOME,),
            type="primary" if nav.active_tab.is_home else "secondary",
        )
    for column, key in zip(columns[1:], nav.open_tabs):
        with column:
            col_label, col_close = st.columns([4, 1])
            with col_label:
                st.button(
                    nav.tab_label(key),
                    key=f"tab_{key}",
                    on_click=nav.navigate,
                    args=(key,),
                    type="primary" if key == nav.active_tab else "secondary",
                    use_container_width=True,
                )
            with col_close:
                st.button(
                    "×",
                    key=f"close_{key}",
                    on_click=nav.close,
                    args=(key,),
                    help=f"Close {nav.tab_label(key)}",
                )


# -----------------------------------------------------------------------------
# Main Content
# -----------------------------------------------------------------------------

def render_content(nav: TabNavigator):
    """Render the active tab's view."""
    key = nav.active_tab
    st.markdown(render_breadcrumbs(breadcrumb_trail(nav)), unsafe_allow_html=True)
    st.title(nav.tab_label(key))

    if key.is_home:
        st.info("Pick a page or a class from the sidebar to open a tab.")
    elif key.kind == TabKind.PAGE and key.page == "classroom":
        render_my_classes(nav)
    elif key.kind == TabKind.CLASSROOM:
        render_class_view(nav, key.class_id)
    elif key.kind == TabKind.CLASS_STUDENT:
        class_name = nav.class_label(key) or key.class_id
        st.caption(f"Viewing in {class_name}")
        st.button(
            "Open standalone profile",
            on_click=nav.open_student_profile,
            args=(nav.tab_label(key),),
        )
    elif key.kind == TabKind.STUDENT:
        st.caption("Student profile")
    else:
        st.caption(f"{nav.tab_label(key)} has no content yet.")


def render_my_classes(nav: TabNavigator):
    """Class cards; opening one replaces the My Classes tab."""
    if not st.session_state.roster:
        st.info("No classes found.")
        return

    for roster_class in st.session_state.roster:
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"**{roster_class.name}** ({len(roster_class.students)} students)")
        with col2:
            st.button(
                "Open",
                key=f"myclasses_{roster_class.id}",
                on_click=nav.open_classroom,
                args=(roster_class.id, roster_class.name),
            )


def render_class_view(nav: TabNavigator, class_id: str):
    """Student list; opening a student replaces the class tab."""
    roster_class = find_class(class_id)
    if not roster_class:
        st.error(f"Class not found: {class_id}")
        return

    for student in roster_class.students:
        st.button(
            student.name,
            key=f"class_student_{class_id}_{student.id}",
            on_click=nav.open_student_from_class,
            args=(class_id, student.name, student.id),
        )


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    nav = st.session_state.navigator

    # URL -> tabs, on every run (first load, reload, back/forward)
    nav.sync_from_url()

    render_sidebar(nav)
    render_tabs(nav)
    render_content(nav)


if __name__ == "__main__":
    main()
