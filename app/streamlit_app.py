"""
The Prawn Game - Main App

Streamlit UI for the prompt card deck.
"""

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state, load_prompt_pool
from app.ui.card_style import get_theme


# ---- Page Setup ----

st.set_page_config(
    page_title="The Prawn Game",
    page_icon="🦐",
    layout="centered"
)


def _apply_theme() -> None:
    """Apply page colors for the selected theme."""
    theme = get_theme(st.session_state.theme)
    st.markdown(
        f"<style>.stApp {{ background-color: {theme.page_bg}; color: {theme.page_text}; }}</style>",
        unsafe_allow_html=True
    )


def _render_header() -> None:
    col1, col2 = st.columns([5, 1])
    with col1:
        st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
        st.title("THE PRAWN GAME")
    with col2:
        icon = "🌙" if st.session_state.theme == "classic" else "☀️"
        if st.button(icon, help="Toggle theme", use_container_width=True):
            st.session_state.theme = "midnight" if st.session_state.theme == "classic" else "classic"
            st.rerun()


# ---- Main App ----

def main():
    """Main app entry point."""
    try:
        pool = load_prompt_pool()
        ensure_session_state(pool)
    except (OSError, ValueError) as exc:
        st.error(f"Could not load the deck: {exc}")
        st.stop()

    _apply_theme()
    _render_header()

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
