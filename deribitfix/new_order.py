"""New Order Single message (MsgType 'D')."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from .fix import MessageBuilder, MsgType, format_number, format_timestamp
from .order_types import OrderSide, OrderType, QuantityType, TimeInForce

_POST_ONLY = "6"
_REDUCE_ONLY = "E"


def _flag(value: bool) -> str:
    return "Y" if value else "N"


@dataclass(frozen=True)
class NewOrderSingle:
    """An order submission; the ``with_*`` methods return modified copies."""

    cl_ord_id: str
    side: OrderSide
    order_qty: float
    price: float
    symbol: str
    valid_until_time: datetime | None = None
    exec_inst: str | None = None
    ord_type: OrderType | None = None
    time_in_force: TimeInForce | None = None
    stop_px: float | None = None
    display_qty: float | None = None
    refresh_qty: float | None = None
    qty_type: QuantityType | None = None
    peg_offset_value: float | None = None
    peg_price_type: int | None = None
    deribit_label: str | None = None
    deribit_adv_order_type: str | None = None
    deribit_mm_protection: bool | None = None
    deribit_condition_trigger_method: int | None = None

    @classmethod
    def market(
        cls, cl_ord_id: str, side: OrderSide, order_qty: float, symbol: str
    ) -> NewOrderSingle:
        """A market order; its price is sent as zero."""
        return cls(
            cl_ord_id=cl_ord_id,
            side=side,
            order_qty=order_qty,
            price=0.0,
            symbol=symbol,
            ord_type=OrderType.Market,
        )

    @classmethod
    def limit(
        cls,
        cl_ord_id: str,
        side: OrderSide,
        order_qty: float,
        price: float,
        symbol: str,
    ) -> NewOrderSingle:
        """A limit order at ``price``."""
        return cls(
            cl_ord_id=cl_ord_id,
            side=side,
            order_qty=order_qty,
            price=price,
            symbol=symbol,
            ord_type=OrderType.Limit,
        )

    def with_label(self, label: str) -> NewOrderSingle:
        return replace(self, deribit_label=label)

    def with_time_in_force(self, tif: TimeInForce) -> NewOrderSingle:
        return replace(self, time_in_force=tif)

    def post_only(self) -> NewOrderSingle:
        return replace(self, exec_inst=_POST_ONLY)

    def reduce_only(self) -> NewOrderSingle:
        return replace(self, exec_inst=_REDUCE_ONLY)

    def post_only_reduce_only(self) -> NewOrderSingle:
        return replace(self, exec_inst=_POST_ONLY + _REDUCE_ONLY)

    def with_stop_price(self, stop_px: float) -> NewOrderSingle:
        return replace(self, stop_px=stop_px)

    def with_display_qty(self, display_qty: float) -> NewOrderSingle:
        return replace(self, display_qty=display_qty)

    def with_qty_type(self, qty_type: QuantityType) -> NewOrderSingle:
        return replace(self, qty_type=qty_type)

    def with_mmp(self, enabled: bool) -> NewOrderSingle:
        return replace(self, deribit_mm_protection=enabled)

    def to_fix_message(
        self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int
    ) -> str:
        """Render the order as a raw FIX message string."""
        builder = (
            MessageBuilder()
            .msg_type(MsgType.NewOrderSingle)
            .sender_comp_id(sender_comp_id)
            .target_comp_id(target_comp_id)
            .msg_seq_num(msg_seq_num)
            .sending_time(datetime.now(timezone.utc))
            .field(11, self.cl_ord_id)
            .field(54, OrderSide(self.side).value)
            .field(38, format_number(self.order_qty))
            .field(44, format_number(self.price))
            .field(55, self.symbol)
        )

        optional = (
            (62, None if self.valid_until_time is None else format_timestamp(self.valid_until_time)),
            (18, self.exec_inst),
            (40, None if self.ord_type is None else OrderType(self.ord_type).value),
            (59, None if self.time_in_force is None else TimeInForce(self.time_in_force).value),
            (99, None if self.stop_px is None else format_number(self.stop_px)),
            (1138, None if self.display_qty is None else format_number(self.display_qty)),
            (1088, None if self.refresh_qty is None else format_number(self.refresh_qty)),
            (854, None if self.qty_type is None else str(int(self.qty_type))),
            (211, None if self.peg_offset_value is None else format_number(self.peg_offset_value)),
            (1094, None if self.peg_price_type is None else str(self.peg_price_type)),
            (100010, self.deribit_label),
            (100012, self.deribit_adv_order_type),
            (9008, None if self.deribit_mm_protection is None else _flag(self.deribit_mm_protection)),
            (
                5127,
                None
                if self.deribit_condition_trigger_method is None
                else str(self.deribit_condition_trigger_method),
            ),
        )
        for tag, value in optional:
            if value is not None:
                builder.field(tag, value)

        return str(builder.build())