"""Order Mass Cancel Request (MsgType 'q') and Report (MsgType 'r') messages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from .fix import MessageBuilder, MsgType, ValidationError
from .order_types import MassCancelRequestType

_TAG_FIRST_AFFECTED_ORDER = 535


def _flag(value: bool) -> str:
    return "Y" if value else "N"


@dataclass(frozen=True)
class OrderMassCancelRequest:
    """Request to cancel many orders at once; ``with_*`` methods return copies."""

    cl_ord_id: str
    mass_cancel_request_type: MassCancelRequestType
    deribit_label: str | None = None
    security_type: str | None = None
    symbol: str | None = None
    currency: str | None = None
    freeze_quotes: bool | None = None

    @classmethod
    def all_orders(cls, cl_ord_id: str) -> OrderMassCancelRequest:
        return cls(cl_ord_id, MassCancelRequestType.AllOrders)

    @classmethod
    def by_symbol(cls, cl_ord_id: str, symbol: str) -> OrderMassCancelRequest:
        return cls(cl_ord_id, MassCancelRequestType.BySymbol, symbol=symbol)

    @classmethod
    def by_security_type(cls, cl_ord_id: str, security_type: str) -> OrderMassCancelRequest:
        return cls(
            cl_ord_id, MassCancelRequestType.BySecurityType, security_type=security_type
        )

    @classmethod
    def by_deribit_label(cls, cl_ord_id: str, deribit_label: str) -> OrderMassCancelRequest:
        return cls(
            cl_ord_id, MassCancelRequestType.ByDeribitLabel, deribit_label=deribit_label
        )

    def with_currency(self, currency: str) -> OrderMassCancelRequest:
        return replace(self, currency=currency)

    def with_freeze_quotes(self, freeze_quotes: bool) -> OrderMassCancelRequest:
        return replace(self, freeze_quotes=freeze_quotes)

    def to_fix_message(
        self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int
    ) -> str:
        """Render the request as a raw FIX message string.

        Raises ValidationError when the field the cancel type depends on is missing.
        """
        request_type = MassCancelRequestType(self.mass_cancel_request_type)
        builder = (
            MessageBuilder()
            .msg_type(MsgType.OrderMassCancelRequest)
            .sender_comp_id(sender_comp_id)
            .target_comp_id(target_comp_id)
            .msg_seq_num(msg_seq_num)
            .sending_time(datetime.now(timezone.utc))
            .field(11, self.cl_ord_id)
            .field(530, str(int(request_type)))
        )

        required = {
            MassCancelRequestType.ByDeribitLabel: (100010, self.deribit_label, "DeribitLabel"),
            MassCancelRequestType.BySecurityType: (167, self.security_type, "SecurityType"),
            MassCancelRequestType.BySymbol: (55, self.symbol, "Symbol"),
        }
        if request_type in required:
            tag, value, name = required[request_type]
            if value is None:
                raise ValidationError(
                    f"{name} is required for {request_type.name} mass cancel type"
                )
            builder.field(tag, value)

        if self.currency is not None:
            builder.field(15, self.currency)
        if self.freeze_quotes is not None:
            builder.field(9031, _flag(self.freeze_quotes))

        return str(builder.build())


@dataclass(frozen=True)
class OrderMassCancelReport:
    """Outcome of a mass cancel request; ``with_*`` methods return copies."""

    cl_ord_id: str | None
    mass_cancel_request_type: MassCancelRequestType
    order_id: str | None = None
    mass_cancel_response: int | None = None
    mass_cancel_reject_reason: int | None = None
    total_affected_orders: int | None = None
    no_affected_orders: int | None = None
    affected_orig_cl_ord_ids: tuple[str, ...] = field(default_factory=tuple)
    text: str | None = None

    def with_response(self, response: int) -> OrderMassCancelReport:
        return replace(self, mass_cancel_response=response)

    def with_reject_reason(self, reason: int) -> OrderMassCancelReport:
        return replace(self, mass_cancel_reject_reason=reason)

    def with_total_affected_orders(self, total: int) -> OrderMassCancelReport:
        return replace(self, total_affected_orders=total)

    def with_affected_orders(self, order_ids: Iterable[str]) -> OrderMassCancelReport:
        """Copy listing the affected orders; their count is set to match."""
        ids = tuple(order_ids)
        return replace(self, affected_orig_cl_ord_ids=ids, no_affected_orders=len(ids))

    def with_text(self, text: str) -> OrderMassCancelReport:
        return replace(self, text=text)

    def to_fix_message(
        self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int
    ) -> str:
        """Render the report as a raw FIX message string."""
        builder = (
            MessageBuilder()
            .msg_type(MsgType.OrderMassCancelReport)
            .sender_comp_id(sender_comp_id)
            .target_comp_id(target_comp_id)
            .msg_seq_num(msg_seq_num)
            .sending_time(datetime.now(timezone.utc))
            .field(530, str(int(MassCancelRequestType(self.mass_cancel_request_type))))
        )

        optional = (
            (11, self.cl_ord_id),
            (37, self.order_id),
            (531, self.mass_cancel_response),
            (532, self.mass_cancel_reject_reason),
            (533, self.total_affected_orders),
            (534, self.no_affected_orders),
        )
        for tag, value in optional:
            if value is not None:
                builder.field(tag, str(value))

        for offset, order_id in enumerate(self.affected_orig_cl_ord_ids):
            builder.field(_TAG_FIRST_AFFECTED_ORDER + offset, order_id)

        if self.text is not None:
            builder.field(58, self.text)

        return str(builder.build())