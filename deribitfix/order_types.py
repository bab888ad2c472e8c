"""Enumerations used by the order management messages."""

from __future__ import annotations

from enum import Enum, IntEnum


class OrderSide(str, Enum):
    """Side (tag 54)."""

    Buy = "1"
    Sell = "2"


class OrderType(str, Enum):
    """OrdType (tag 40)."""

    Market = "1"
    Limit = "2"
    MarketLimit = "K"
    StopLimit = "4"
    MarketIfTouched = "J"
    StopLimitOnBidOffer = "S"


class TimeInForce(str, Enum):
    """TimeInForce (tag 59)."""

    GoodTillDay = "0"
    GoodTillCancelled = "1"
    ImmediateOrCancel = "3"
    FillOrKill = "4"


class OrderStatus(str, Enum):
    """OrdStatus (tag 39)."""

    New = "0"
    PartiallyFilled = "1"
    Filled = "2"
    Cancelled = "4"
    PendingCancel = "6"
    Rejected = "8"


class OrderRejectReason(IntEnum):
    """OrdRejReason (tag 103)."""

    NoReject = 0
    UnknownSymbol = 1
    ExchangeClosed = 2
    OrderExceedsLimit = 3
    TooLateToEnter = 4
    UnknownOrder = 5
    DuplicateOrder = 6
    DuplicateVerbalOrder = 7
    StaleOrder = 8
    TradeAlongRequired = 9
    InvalidInvestorId = 10
    UnsupportedOrderCharacteristic = 11
    SurveillanceOption = 12
    IncorrectQuantity = 13
    IncorrectAllocatedQuantity = 14
    UnknownAccount = 15
    PriceExceedsPriceBand = 16
    InvalidPriceIncrement = 18
    Other = 99


class MassCancelRequestType(IntEnum):
    """MassCancelRequestType (tag 530)."""

    BySymbol = 1
    BySecurityType = 5
    AllOrders = 7
    ByDeribitLabel = 10


class MassStatusRequestType(IntEnum):
    """MassStatusReqType (tag 585)."""

    SpecificOrder = 1
    AllOrders = 7


class MassStatusRequestIdType(IntEnum):
    """MassStatusReqIDType (tag 9014)."""

    OrigClOrdId = 0
    ClOrdId = 1
    DeribitLabel = 2


class QuantityType(IntEnum):
    """QtyType (tag 854)."""

    Units = 0
    Contracts = 1