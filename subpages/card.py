# subpages/card.py
# ----------------------------------------------------------
# The business card: photo, info block, toggle + portfolio
# ----------------------------------------------------------

from __future__ import annotations
import logging
from pathlib import Path

import streamlit as st

from businesscard.catalog import ProjectCatalog
from businesscard.resources import ResourceNotFound, profile_image, string_resource
from businesscard.state import CardState, PortfolioView
from subpages.portfolio import portfolio_page

logger = logging.getLogger(__name__)

STATE_KEY = "card_state"
PROFILE_SIZE_PX = 150


# -----------------------------
# Theme + CSS
# -----------------------------
def is_dark_theme() -> bool:
    try:
        base = (st.get_option("theme.base") or "light").lower()
    except Exception:
        base = "light"
    return base == "dark"


def inject_css(dark: bool):
    # keyed containers get a "st-key-<key>" class
    border = "rgba(255,255,255,.15)" if dark else "rgba(0,0,0,.12)"
    st.markdown(f"""
<style>
/* profile picture: circle crop with a light ring */
.st-key-card-photo img {{
  border-radius: 50%;
  border: 1px solid {border};
  box-shadow: 0 2px 6px rgba(0,0,0,0.12);
}}

/* project row pictures share the same circle */
.st-key-portfolio-frame img {{
  border-radius: 50%;
}}

.st-key-portfolio-frame {{
  border: 2px solid {border} !important;
  border-radius: 6px;
}}

.card-name {{
  font-weight: 700;
  font-size: 2rem;
  line-height: 1.1;
  text-align: center;
  margin: 6px 0 2px;
}}

.card-line {{
  text-align: center;
  opacity: .9;
  margin: 2px 0;
}}
</style>
""", unsafe_allow_html=True)


# -----------------------------
# State + resources
# -----------------------------
def get_card_state() -> CardState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = CardState()
    return st.session_state[STATE_KEY]


@st.cache_data(show_spinner=False)
def _profile_png(path_str: str) -> bytes:
    return profile_image(Path(path_str))


def load_image(path: Path) -> bytes:
    return _profile_png(str(path))


def text(key: str) -> str:
    try:
        return string_resource(key)
    except ResourceNotFound:
        logger.warning("missing string resource %r", key)
        return key


# -----------------------------
# Card pieces
# -----------------------------
def render_profile_image(picture: Path):
    _, mid, _ = st.columns([1, 1, 1])
    with mid:
        with st.container(key="card-photo"):
            try:
                st.image(load_image(picture), width=PROFILE_SIZE_PX)
            except ResourceNotFound:
                st.error(f"{text('profile_picture_description')}: image not found at {picture}")


def render_info():
    st.markdown(f'<div class="card-name">{text("name")}</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="card-line">{text("job_title")}</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="card-line"><small>{text("github_handle")}</small></div>', unsafe_allow_html=True)


def render_card(profile_picture: Path, show_project_images: bool = True):
    """Whole card for the current session; the portfolio shows only when visible."""
    profile_picture = Path(profile_picture)
    state = get_card_state()
    inject_css(is_dark_theme())

    with st.container(border=True):
        render_profile_image(profile_picture)
        st.markdown("---")
        render_info()

        # on_click runs before this script run, so label and list below see the new state
        st.button(state.label(), key="toggle_portfolio", on_click=state.toggle,
                  use_container_width=True)

        if state.view is PortfolioView.VISIBLE:
            portfolio_page(
                ProjectCatalog.list(),
                default_image=profile_picture,
                load_image=load_image,
                show_images=show_project_images,
            )
        else:
            st.empty()
