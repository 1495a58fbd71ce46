# businesscard/state.py
# ----------------------------------------------------------
# Card view state: whether the portfolio list is showing.
# ----------------------------------------------------------

from __future__ import annotations
import logging
from enum import Enum

from businesscard.resources import string_resource

logger = logging.getLogger(__name__)


class PortfolioView(Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"

    def flipped(self) -> "PortfolioView":
        return PortfolioView.VISIBLE if self is PortfolioView.HIDDEN else PortfolioView.HIDDEN


class CardState:
    """Visibility of the portfolio for one rendered card.

    Starts hidden. ``toggle`` is the only writer; every read after it sees the
    new value.
    """

    def __init__(self) -> None:
        self._view = PortfolioView.HIDDEN

    @property
    def view(self) -> PortfolioView:
        return self._view

    def toggle(self) -> None:
        self._view = self._view.flipped()
        logger.debug("portfolio view -> %s", self._view.value)

    def is_visible(self) -> bool:
        return self._view is PortfolioView.VISIBLE

    def label(self) -> str:
        """Caption for the toggle button in the current state."""
        if self.is_visible():
            return string_resource("hide_portfolio")
        return string_resource("show_portfolio")

    def __repr__(self) -> str:
        return f"CardState(view={self._view.value})"
