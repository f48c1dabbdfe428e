"""Application service: Toggle Cart use case.

Only flips a UI flag; nothing in the domain depends on it.  Passing
``visible=False`` is how a presentation layer reports that the user
dismissed the cart (e.g. clicked outside of it).
"""

from __future__ import annotations

from lemonstand.domain.model.session import SessionState


class ToggleCartHandler:

    def __init__(self, session: SessionState) -> None:
        self._session = session

    def handle(self, visible: bool | None = None) -> bool:
        """Set the cart visibility, or flip it when *visible* is None."""
        if visible is None:
            visible = not self._session.cart_visible
        self._session.cart_visible = visible
        return visible
