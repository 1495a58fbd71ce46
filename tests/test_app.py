from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image
from streamlit.testing.v1 import AppTest

APP = Path(__file__).resolve().parents[1] / "streamlit_repo" / "app.py"
TITLES = ["ImageViewMVVMApp", "PerfectFit", "JavaGPSDemo"]
DESCRIPTIONS = [
    "Allows the user to search the internet for images based on a search term.",
    "A fitness app developed as part of my third year dissertation project.",
    "A demo of accessing and using GPS data using Java.",
]


def _card_script(picture: str, show_project_images: bool = True) -> None:
    from subpages.card import render_card

    render_card(picture, show_project_images=show_project_images)


@pytest.fixture
def at() -> AppTest:
    app = AppTest.from_file(str(APP), default_timeout=30)
    app.run()
    assert not app.exception
    return app


@pytest.fixture
def picture(tmp_path: Path) -> Path:
    p = tmp_path / "profile_picture.png"
    Image.new("RGB", (60, 40), (40, 90, 160)).save(p)
    return p


def _card_with_picture(picture: Path, **kwargs: object) -> AppTest:
    app = AppTest.from_function(
        _card_script, default_timeout=30, args=(str(picture),), kwargs=kwargs
    )
    app.run()
    assert not app.exception
    return app


def _project_titles(app: AppTest) -> list[str]:
    return [m.value.strip("*") for m in app.markdown if m.value.startswith("**")]


def _images(app: AppTest) -> list:
    return list(app.get("imgs"))


def test_new_card_hides_portfolio(at: AppTest) -> None:
    assert at.button(key="toggle_portfolio").label == "show portfolio"
    assert at.session_state["card_state"].is_visible() is False
    assert _project_titles(at) == []


def test_toggle_once_shows_projects_in_order(at: AppTest) -> None:
    at.button(key="toggle_portfolio").click().run()

    assert not at.exception
    assert at.button(key="toggle_portfolio").label == "hide portfolio"
    assert _project_titles(at) == TITLES
    captions = [c.value for c in at.caption]
    assert [c for c in captions if c in DESCRIPTIONS] == DESCRIPTIONS


def test_toggle_twice_returns_to_hidden(at: AppTest) -> None:
    at.button(key="toggle_portfolio").click().run()
    at.button(key="toggle_portfolio").click().run()

    assert at.button(key="toggle_portfolio").label == "show portfolio"
    assert at.session_state["card_state"].is_visible() is False
    assert _project_titles(at) == []


def test_info_block_rendered(at: AppTest) -> None:
    html = " ".join(m.value for m in at.markdown)
    assert "Sam White" in html
    assert "Android Developer" in html
    assert "@swhite" in html


def test_missing_profile_picture_surfaces_as_error(tmp_path: Path) -> None:
    app = _card_with_picture(tmp_path / "absent.png")

    assert any("image not found" in e.value for e in app.error)
    assert _images(app) == []


def test_broken_profile_picture_surfaces_as_error(tmp_path: Path) -> None:
    p = tmp_path / "profile_picture.png"
    p.mkdir()

    app = _card_with_picture(p)

    assert any("image not found" in e.value for e in app.error)


def test_profile_picture_rendered(picture: Path) -> None:
    app = _card_with_picture(picture)

    assert len(app.error) == 0
    assert len(_images(app)) == 1


def test_project_rows_share_profile_picture(picture: Path) -> None:
    app = _card_with_picture(picture)
    app.button(key="toggle_portfolio").click().run()

    assert not app.exception
    assert _project_titles(app) == TITLES
    # profile + one per project
    assert len(_images(app)) == 4


def test_project_rows_without_pictures(picture: Path) -> None:
    app = _card_with_picture(picture, show_project_images=False)
    app.button(key="toggle_portfolio").click().run()

    assert not app.exception
    assert _project_titles(app) == TITLES
    assert len(_images(app)) == 1


def test_photo_css_targets_keyed_containers(picture: Path) -> None:
    app = _card_with_picture(picture)

    css = next(m.value for m in app.markdown if "<style>" in m.value)
    assert ".st-key-card-photo img" in css
    assert "border-radius: 50%" in css
