# subpages/portfolio.py
# ----------------------------------------------------------
# Streamlit rendering of the portfolio list under the card
# ----------------------------------------------------------

from __future__ import annotations
from pathlib import Path
from typing import Callable, Sequence

import streamlit as st

from businesscard.catalog import Project, ProjectCatalog
from businesscard.resources import ResourceNotFound

LIST_HEIGHT_PX = 320
ROW_IMAGE_PX = 50


def project_row(project: Project, image: bytes | None, show_image: bool = True):
    """One project: small picture on the left, bold title over the description."""
    with st.container(border=True):
        if show_image:
            c_img, c_txt = st.columns([1, 4], vertical_alignment="center")
            with c_img:
                if image is not None:
                    st.image(image, width=ROW_IMAGE_PX)
        else:
            c_txt = st.container()
        with c_txt:
            st.markdown(f"**{project.title}**")
            st.caption(project.description)


def portfolio_page(
    projects: Sequence[Project],
    default_image: Path,
    load_image: Callable[[Path], bytes],
    show_images: bool = True,
):
    """Render ``projects`` in the given order inside a scrollable frame.

    ``load_image`` may raise :class:`ResourceNotFound`; the row is then drawn
    without a picture.
    """
    with st.container(height=LIST_HEIGHT_PX, border=True, key="portfolio-frame"):
        for p in projects:
            image = None
            if show_images:
                try:
                    image = load_image(ProjectCatalog.image_for(p, default_image))
                except ResourceNotFound:
                    image = None
            project_row(p, image, show_image=show_images)
