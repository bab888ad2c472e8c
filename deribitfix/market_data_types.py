"""Enumerations and entries used by the market data messages."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum, IntEnum


class MdSubscriptionRequestType(IntEnum):
    """SubscriptionRequestType (tag 263)."""

    Snapshot = 0
    SnapshotPlusUpdates = 1
    Unsubscribe = 2


class MdUpdateType(IntEnum):
    """MDUpdateType (tag 265)."""

    FullRefresh = 0
    IncrementalRefresh = 1


class MdEntryType(IntEnum):
    """MDEntryType (tag 269)."""

    Bid = 0
    Offer = 1
    Trade = 2
    IndexValue = 3
    SettlementPrice = 6


class MdUpdateAction(str, Enum):
    """MDUpdateAction (tag 279)."""

    New = "0"
    Change = "1"
    Delete = "2"


class MdReqRejReason(str, Enum):
    """MDReqRejReason (tag 281)."""

    UnknownSymbol = "0"
    DuplicateMdReqId = "1"
    InsufficientBandwidth = "2"
    InsufficientPermissions = "3"
    UnsupportedSubscriptionRequestType = "4"
    UnsupportedMarketDepth = "5"
    UnsupportedMdUpdateType = "6"
    UnsupportedAggregatedBook = "7"
    UnsupportedMdEntryType = "8"
    UnsupportedTradingSessionId = "9"
    UnsupportedScope = "A"
    UnsupportedOpenCloseSettlFlag = "B"
    UnsupportedMdImplicitDelete = "C"
    InsufficientCredit = "D"


@dataclass(frozen=True)
class MdEntry:
    """One market data entry; ``with_update_action`` returns a modified copy."""

    md_entry_type: MdEntryType
    md_entry_px: float | None = None
    md_entry_size: float | None = None
    md_entry_date: datetime | None = None
    md_update_action: MdUpdateAction | None = None
    trade_id: str | None = None
    side: str | None = None
    order_id: str | None = None
    secondary_order_id: str | None = None

    @classmethod
    def bid(cls, price: float, size: float) -> MdEntry:
        """A bid-side book entry."""
        return cls(MdEntryType.Bid, md_entry_px=price, md_entry_size=size)

    @classmethod
    def offer(cls, price: float, size: float) -> MdEntry:
        """An offer-side book entry."""
        return cls(MdEntryType.Offer, md_entry_px=price, md_entry_size=size)

    @classmethod
    def trade(
        cls,
        price: float,
        size: float,
        side: str,
        trade_id: str,
        timestamp: datetime,
    ) -> MdEntry:
        """A trade entry with its side, id and time."""
        return cls(
            MdEntryType.Trade,
            md_entry_px=price,
            md_entry_size=size,
            md_entry_date=timestamp,
            trade_id=trade_id,
            side=side,
        )

    def with_update_action(self, action: MdUpdateAction) -> MdEntry:
        """Copy carrying an update action for incremental refreshes."""
        return replace(self, md_update_action=MdUpdateAction(action))