"""Order Cancel Request message (MsgType 'F')."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from .fix import MessageBuilder, MsgType, ValidationError


@dataclass(frozen=True)
class OrderCancelRequest:
    """Cancel one order, identified by OrigClOrdID, ClOrdID or Deribit label."""

    cl_ord_id: str | None = None
    orig_cl_ord_id: str | None = None
    deribit_label: str | None = None
    symbol: str | None = None
    currency: str | None = None

    @classmethod
    def by_orig_cl_ord_id(cls, orig_cl_ord_id: str) -> OrderCancelRequest:
        return cls(orig_cl_ord_id=orig_cl_ord_id)

    @classmethod
    def by_cl_ord_id(cls, cl_ord_id: str, symbol: str) -> OrderCancelRequest:
        return cls(cl_ord_id=cl_ord_id, symbol=symbol)

    @classmethod
    def by_deribit_label(cls, deribit_label: str, symbol: str) -> OrderCancelRequest:
        return cls(deribit_label=deribit_label, symbol=symbol)

    def with_currency(self, currency: str) -> OrderCancelRequest:
        """Copy with a currency set to narrow the search."""
        return replace(self, currency=currency)

    def to_fix_message(
        self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int
    ) -> str:
        """Render the request as a raw FIX message string.

        Raises ValidationError when no order identifier is set.
        """
        builder = (
            MessageBuilder()
            .msg_type(MsgType.OrderCancelRequest)
            .sender_comp_id(sender_comp_id)
            .target_comp_id(target_comp_id)
            .msg_seq_num(msg_seq_num)
            .sending_time(datetime.now(timezone.utc))
        )

        if self.cl_ord_id is None and self.orig_cl_ord_id is None and self.deribit_label is None:
            raise ValidationError("Either OrigClOrdId or ClOrdId must be specified")

        for tag, value in (
            (11, self.cl_ord_id),
            (41, self.orig_cl_ord_id),
            (100010, self.deribit_label),
            (55, self.symbol),
            (15, self.currency),
        ):
            if value is not None:
                builder.field(tag, value)

        return str(builder.build())