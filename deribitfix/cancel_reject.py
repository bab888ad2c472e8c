"""Order Cancel Reject message (MsgType '9')."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from .fix import MessageBuilder, MsgType, format_timestamp
from .order_types import OrderStatus


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderCancelReject:
    """Rejection of a cancel request; the ``with_*`` methods return modified copies."""

    ord_status: OrderStatus | None = None
    cxl_rej_reason: int | None = None
    text: str | None = None
    sending_time: datetime = field(default_factory=_utc_now)
    cxl_rej_response_to: str | None = None
    cl_ord_id: str | None = None
    orig_cl_ord_id: str | None = None
    deribit_label: str | None = None

    def with_cl_ord_id(self, cl_ord_id: str) -> OrderCancelReject:
        return replace(self, cl_ord_id=cl_ord_id)

    def with_orig_cl_ord_id(self, orig_cl_ord_id: str) -> OrderCancelReject:
        return replace(self, orig_cl_ord_id=orig_cl_ord_id)

    def with_deribit_label(self, deribit_label: str) -> OrderCancelReject:
        return replace(self, deribit_label=deribit_label)

    def with_cxl_rej_response_to(self, response_to: str) -> OrderCancelReject:
        return replace(self, cxl_rej_response_to=response_to)

    def to_fix_message(
        self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int
    ) -> str:
        """Render the reject as a raw FIX message string."""
        builder = (
            MessageBuilder()
            .msg_type(MsgType.OrderCancelReject)
            .sender_comp_id(sender_comp_id)
            .target_comp_id(target_comp_id)
            .msg_seq_num(msg_seq_num)
            .sending_time(self.sending_time)
            .field(52, format_timestamp(self.sending_time))
        )

        optional = (
            (39, None if self.ord_status is None else OrderStatus(self.ord_status).value),
            (102, None if self.cxl_rej_reason is None else str(self.cxl_rej_reason)),
            (434, self.cxl_rej_response_to),
            (58, self.text),
            (11, self.cl_ord_id),
            (41, self.orig_cl_ord_id),
            (100010, self.deribit_label),
        )
        for tag, value in optional:
            if value is not None:
                builder.field(tag, value)

        return str(builder.build())