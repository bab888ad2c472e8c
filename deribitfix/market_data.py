"""Market data messages: request (V), reject (Y), snapshot (W) and incremental refresh (X)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone

from .fix import MessageBuilder, MsgType, format_number
from .market_data_types import (
    MdEntry,
    MdEntryType,
    MdReqRejReason,
    MdSubscriptionRequestType,
    MdUpdateAction,
    MdUpdateType,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _epoch_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // timedelta(milliseconds=1)


def _start(msg_type: MsgType, sender_comp_id: str, target_comp_id: str, msg_seq_num: int) -> MessageBuilder:
    return (
        MessageBuilder()
        .msg_type(msg_type)
        .sender_comp_id(sender_comp_id)
        .target_comp_id(target_comp_id)
        .msg_seq_num(msg_seq_num)
        .sending_time(datetime.now(timezone.utc))
    )


def _add_entry_fields(builder: MessageBuilder, entry: MdEntry) -> None:
    builder.field(269, str(int(MdEntryType(entry.md_entry_type))))
    if entry.md_entry_px is not None:
        builder.field(270, format_number(entry.md_entry_px))
    if entry.md_entry_size is not None:
        builder.field(271, format_number(entry.md_entry_size))
    if entry.md_entry_date is not None:
        builder.field(272, str(_epoch_millis(entry.md_entry_date)))
    if entry.trade_id is not None:
        builder.field(100009, entry.trade_id)
    if entry.side is not None:
        builder.field(54, entry.side)


@dataclass(frozen=True)
class MarketDataRequest:
    """Request for a snapshot, a subscription, or an unsubscription."""

    md_req_id: str
    subscription_request_type: MdSubscriptionRequestType
    market_depth: int | None = None
    md_update_type: MdUpdateType | None = None
    skip_block_trades: bool | None = None
    show_block_trade_id: bool | None = None
    trade_amount: int | None = None
    since_timestamp: int | None = None
    entry_types: tuple[MdEntryType, ...] = field(default_factory=tuple)
    symbols: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def snapshot(
        cls, md_req_id: str, symbols: Iterable[str], entry_types: Iterable[MdEntryType]
    ) -> MarketDataRequest:
        return cls(
            md_req_id,
            MdSubscriptionRequestType.Snapshot,
            entry_types=tuple(entry_types),
            symbols=tuple(symbols),
        )

    @classmethod
    def subscription(
        cls,
        md_req_id: str,
        symbols: Iterable[str],
        entry_types: Iterable[MdEntryType],
        md_update_type: MdUpdateType,
    ) -> MarketDataRequest:
        return cls(
            md_req_id,
            MdSubscriptionRequestType.SnapshotPlusUpdates,
            md_update_type=MdUpdateType(md_update_type),
            entry_types=tuple(entry_types),
            symbols=tuple(symbols),
        )

    @classmethod
    def unsubscribe(cls, md_req_id: str) -> MarketDataRequest:
        return cls(md_req_id, MdSubscriptionRequestType.Unsubscribe)

    def to_fix_message(self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int) -> str:
        """Render the request as a raw FIX message string."""
        builder = (
            _start(MsgType.MarketDataRequest, sender_comp_id, target_comp_id, msg_seq_num)
            .field(262, self.md_req_id)
            .field(263, str(int(MdSubscriptionRequestType(self.subscription_request_type))))
        )
        if self.market_depth is not None:
            builder.field(264, str(self.market_depth))
        if self.md_update_type is not None:
            builder.field(265, str(int(MdUpdateType(self.md_update_type))))

        builder.field(267, str(len(self.entry_types)))
        for entry_type in self.entry_types:
            builder.field(269, str(int(MdEntryType(entry_type))))

        if self.symbols:
            builder.field(146, str(len(self.symbols)))
            for symbol in self.symbols:
                builder.field(55, symbol)

        return str(builder.build())


@dataclass(frozen=True)
class MarketDataRequestReject:
    """Rejection of a market data request."""

    md_req_id: str
    md_req_rej_reason: MdReqRejReason
    text: str | None = None

    @classmethod
    def with_text(
        cls, md_req_id: str, reason: MdReqRejReason, text: str
    ) -> MarketDataRequestReject:
        return cls(md_req_id, reason, text)

    def to_fix_message(self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int) -> str:
        """Render the reject as a raw FIX message string."""
        builder = (
            _start(MsgType.MarketDataRequestReject, sender_comp_id, target_comp_id, msg_seq_num)
            .field(262, self.md_req_id)
            .field(281, MdReqRejReason(self.md_req_rej_reason).value)
        )
        if self.text is not None:
            builder.field(58, self.text)
        return str(builder.build())


@dataclass(frozen=True)
class MarketDataSnapshotFullRefresh:
    """Full snapshot of one instrument's market data."""

    symbol: str
    md_req_id: str | None = None
    entries: tuple[MdEntry, ...] = field(default_factory=tuple)

    def with_request_id(self, md_req_id: str) -> MarketDataSnapshotFullRefresh:
        return replace(self, md_req_id=md_req_id)

    def with_entries(self, entries: Iterable[MdEntry]) -> MarketDataSnapshotFullRefresh:
        return replace(self, entries=tuple(entries))

    def to_fix_message(self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int) -> str:
        """Render the snapshot as a raw FIX message string."""
        builder = _start(
            MsgType.MarketDataSnapshotFullRefresh, sender_comp_id, target_comp_id, msg_seq_num
        ).field(55, self.symbol)
        if self.md_req_id is not None:
            builder.field(262, self.md_req_id)
        builder.field(268, str(len(self.entries)))
        for entry in self.entries:
            _add_entry_fields(builder, entry)
        return str(builder.build())


@dataclass(frozen=True)
class MarketDataIncrementalRefresh:
    """Incremental changes to one instrument's market data."""

    symbol: str
    md_req_id: str | None = None
    entries: tuple[MdEntry, ...] = field(default_factory=tuple)

    def with_request_id(self, md_req_id: str) -> MarketDataIncrementalRefresh:
        return replace(self, md_req_id=md_req_id)

    def with_entries(self, entries: Iterable[MdEntry]) -> MarketDataIncrementalRefresh:
        return replace(self, entries=tuple(entries))

    def to_fix_message(self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int) -> str:
        """Render the refresh as a raw FIX message string."""
        builder = _start(
            MsgType.MarketDataIncrementalRefresh, sender_comp_id, target_comp_id, msg_seq_num
        ).field(55, self.symbol)
        if self.md_req_id is not None:
            builder.field(262, self.md_req_id)
        builder.field(268, str(len(self.entries)))
        for entry in self.entries:
            if entry.md_update_action is not None:
                builder.field(279, MdUpdateAction(entry.md_update_action).value)
            _add_entry_fields(builder, entry)
        return str(builder.build())