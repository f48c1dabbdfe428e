"""Application services: Buy Lemons and Sell Lemons use cases.

One lemon per call.  Buying costs $5.00 of profit, selling earns $3.00.
"""

from __future__ import annotations

from lemonstand.application.dto import StandDTO, format_money
from lemonstand.domain.model.session import SessionState
from lemonstand.domain.model.stand import LemonStand


def _to_dto(stand: LemonStand) -> StandDTO:
    return StandDTO(profit=format_money(stand.profit), lemons_stock=stand.lemons_stock)


class BuyLemonsHandler:

    def __init__(self, session: SessionState) -> None:
        self._session = session

    def handle(self) -> StandDTO:
        """Raises InsufficientFundsError when profit is below the lemon price."""
        self._session.stand.buy_lemon()
        return _to_dto(self._session.stand)


class SellLemonsHandler:

    def __init__(self, session: SessionState) -> None:
        self._session = session

    def handle(self) -> StandDTO:
        """Raises OutOfStockError when no lemons are left."""
        self._session.stand.sell_lemon()
        return _to_dto(self._session.stand)
