"""Order Mass Status Request message (MsgType 'AF')."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from .fix import MessageBuilder, MsgType, ValidationError
from .order_types import MassStatusRequestIdType, MassStatusRequestType


@dataclass(frozen=True)
class OrderMassStatusRequest:
    """Request for the status of all orders or of one order."""

    mass_status_req_id: str
    mass_status_req_type: MassStatusRequestType
    mass_status_req_id_type: MassStatusRequestIdType | None = None
    currency: str | None = None
    symbol: str | None = None

    @classmethod
    def all_orders(cls, mass_status_req_id: str) -> OrderMassStatusRequest:
        return cls(mass_status_req_id, MassStatusRequestType.AllOrders)

    @classmethod
    def specific_order_by_orig_cl_ord_id(cls, orig_cl_ord_id: str) -> OrderMassStatusRequest:
        return cls(
            orig_cl_ord_id,
            MassStatusRequestType.SpecificOrder,
            MassStatusRequestIdType.OrigClOrdId,
        )

    @classmethod
    def specific_order_by_cl_ord_id(
        cls, cl_ord_id: str, currency: str | None = None, symbol: str | None = None
    ) -> OrderMassStatusRequest:
        # Searching by ClOrdID uses request type 7.
        return cls(
            cl_ord_id,
            MassStatusRequestType.AllOrders,
            MassStatusRequestIdType.ClOrdId,
            currency,
            symbol,
        )

    @classmethod
    def specific_order_by_deribit_label(
        cls, deribit_label: str, currency: str | None = None, symbol: str | None = None
    ) -> OrderMassStatusRequest:
        return cls(
            deribit_label,
            MassStatusRequestType.AllOrders,
            MassStatusRequestIdType.DeribitLabel,
            currency,
            symbol,
        )

    def with_currency(self, currency: str) -> OrderMassStatusRequest:
        return replace(self, currency=currency)

    def with_symbol(self, symbol: str) -> OrderMassStatusRequest:
        return replace(self, symbol=symbol)

    def to_fix_message(
        self, sender_comp_id: str, target_comp_id: str, msg_seq_num: int
    ) -> str:
        """Render the request as a raw FIX message string.

        Raises ValidationError when searching by ClOrdID or Deribit label
        without a currency or symbol.
        """
        builder = (
            MessageBuilder()
            .msg_type(MsgType.OrderMassStatusRequest)
            .sender_comp_id(sender_comp_id)
            .target_comp_id(target_comp_id)
            .msg_seq_num(msg_seq_num)
            .sending_time(datetime.now(timezone.utc))
            .field(584, self.mass_status_req_id)
            .field(585, str(int(self.mass_status_req_type)))
        )

        id_type = self.mass_status_req_id_type
        if id_type is not None:
            builder.field(9014, str(int(id_type)))
            if (
                id_type in (MassStatusRequestIdType.ClOrdId, MassStatusRequestIdType.DeribitLabel)
                and self.currency is None
                and self.symbol is None
            ):
                raise ValidationError(
                    "Currency or Symbol is required when searching by ClOrdId or DeribitLabel"
                )

        if self.currency is not None:
            builder.field(15, self.currency)
        if self.symbol is not None:
            builder.field(55, self.symbol)

        return str(builder.build())