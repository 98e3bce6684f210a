"""Trade orders: which wares an object provides or requests."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

TradeOrderId = int
WareId = int

TRADE_ORDER_ID_SHIPYARD: TradeOrderId = 0
TRADE_ORDER_ID_FACTORY: TradeOrderId = 1
TRADE_ORDER_ID_EXTRACTABLE: TradeOrderId = 2
TRADE_ORDER_ID_BUILDING_SITE: TradeOrderId = 3


def _unique(values: Iterable[WareId]) -> list[WareId]:
    return list(dict.fromkeys(values))


@dataclass
class TradeOrders:
    """Lists of (order id, ware id) pairs provided and requested by an object."""

    provided: list[tuple[TradeOrderId, WareId]] = field(default_factory=list)
    requested: list[tuple[TradeOrderId, WareId]] = field(default_factory=list)

    @classmethod
    def from_provided(cls, order_id: TradeOrderId, provided: Iterable[WareId]) -> TradeOrders:
        return cls(provided=[(order_id, ware_id) for ware_id in provided])

    @classmethod
    def from_requested(cls, order_id: TradeOrderId, requested: Iterable[WareId]) -> TradeOrders:
        return cls(requested=[(order_id, ware_id) for ware_id in requested])

    def is_empty(self) -> bool:
        return not self.provided and not self.requested

    def wares_requests(self) -> list[WareId]:
        """Distinct requested wares, in first-seen order."""
        return _unique(ware_id for _, ware_id in self.requested)

    def wares_provider(self) -> list[WareId]:
        """Distinct provided wares, in first-seen order."""
        return _unique(ware_id for _, ware_id in self.provided)

    def is_provide(self) -> bool:
        return bool(self.provided)

    def is_requesting(self) -> bool:
        return bool(self.requested)

    def is_requesting_ware(self, ware_id: WareId) -> bool:
        return any(i_ware_id == ware_id for _, i_ware_id in self.requested)

    def is_providing_ware(self, ware_id: WareId) -> bool:
        return any(i_ware_id == ware_id for _, i_ware_id in self.provided)

    def request_any(self, wares: Iterable[WareId]) -> list[WareId]:
        """The given wares that are requested, in the given order."""
        return [ware_id for ware_id in wares if self.is_requesting_ware(ware_id)]

    def is_request_exactly(self, wares: list[WareId]) -> bool:
        return len(self.request_any(wares)) == len(wares)

    def is_request_any(self, wares: Iterable[WareId]) -> bool:
        return bool(self.request_any(wares))

    def add_request(self, order_id: TradeOrderId, ware_id: WareId) -> None:
        if (order_id, ware_id) in self.requested:
            return
        self.requested.append((order_id, ware_id))
        logger.debug("trade order updated by add_request %r", self)

    def add_provider(self, order_id: TradeOrderId, ware_id: WareId) -> None:
        if (order_id, ware_id) in self.provided:
            return
        self.provided.append((order_id, ware_id))
        logger.debug("trade order updated by add_provide %r", self)

    def _retain_provided_except_other_wares(self, order_id: TradeOrderId, ware_id: WareId) -> None:
        self.provided = [
            (i_order_id, i_ware_id)
            for i_order_id, i_ware_id in self.provided
            if i_order_id != order_id or i_ware_id == ware_id
        ]

    def remove_request(self, order_id: TradeOrderId, ware_id: WareId) -> None:
        """Drop provided entries of order_id whose ware differs from ware_id."""
        self._retain_provided_except_other_wares(order_id, ware_id)
        logger.debug("trade order updated by remove_request %r", self)

    def remove_provider(self, order_id: TradeOrderId, ware_id: WareId) -> None:
        """Drop provided entries of order_id whose ware differs from ware_id."""
        self._retain_provided_except_other_wares(order_id, ware_id)
        logger.debug("trade order updated by remove_provide %r", self)

    def remove_by_id(self, order_id: TradeOrderId) -> None:
        """Keep only the provided entries that belong to order_id."""
        self.provided = [entry for entry in self.provided if entry[0] == order_id]
        logger.debug("trade order updated by remove_by_id %r", self)