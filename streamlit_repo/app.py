# app.py — Business card (single screen) + toggleable portfolio
# ----------------------------------------------------------------
#  • Profile picture, name / job title / handle
#  • One button shows or hides the three portfolio projects
#  • Toggle state lives in st.session_state, one CardState per session
#  • Card rendering lives in subpages/card.py
# ----------------------------------------------------------------

from __future__ import annotations
import logging
from pathlib import Path

import streamlit as st

from subpages.card import render_card

# -----------------------------
# Page config + logging
# -----------------------------
st.set_page_config(
    page_title="Business Card",
    page_icon="🪪",
    layout="centered",
    initial_sidebar_state="collapsed",
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# -----------------------------
# Paths & flags
# -----------------------------
BASE = Path(__file__).resolve().parent
ASSETS = BASE / "assets"
PROFILE_PICTURE = ASSETS / "profile_picture.png"

SHOW_PROJECT_IMAGES = True     # every project shares the profile picture

# -----------------------------
# Dispatch
# -----------------------------
render_card(PROFILE_PICTURE, show_project_images=SHOW_PROJECT_IMAGES)
