"""FIX 4.4 message primitives: errors, message types, messages and a builder."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

SOH = "\x01"
BEGIN_STRING = "FIX.4.4"

_TAG_BEGIN_STRING = 8
_TAG_BODY_LENGTH = 9
_TAG_CHECKSUM = 10
_TAG_MSG_SEQ_NUM = 34
_TAG_MSG_TYPE = 35
_TAG_SENDER_COMP_ID = 49
_TAG_SENDING_TIME = 52
_TAG_TARGET_COMP_ID = 56

_HEADER_ORDER = (
    _TAG_MSG_TYPE,
    _TAG_SENDER_COMP_ID,
    _TAG_TARGET_COMP_ID,
    _TAG_MSG_SEQ_NUM,
    _TAG_SENDING_TIME,
)
_COMPUTED_TAGS = frozenset({_TAG_BEGIN_STRING, _TAG_BODY_LENGTH, _TAG_CHECKSUM})
_REQUIRED_HEADER = (
    (_TAG_MSG_TYPE, "MsgType"),
    (_TAG_SENDER_COMP_ID, "SenderCompID"),
    (_TAG_TARGET_COMP_ID, "TargetCompID"),
    (_TAG_MSG_SEQ_NUM, "MsgSeqNum"),
)


class DeribitFixError(Exception):
    """Base class for all errors raised by this package."""

    label = "Error"

    def __str__(self) -> str:
        return f"{self.label}: {super().__str__()}"


class MessageConstructionError(DeribitFixError):
    """A FIX message could not be assembled."""

    label = "Message construction error"


class ValidationError(DeribitFixError):
    """A message's content breaks a protocol rule."""

    label = "Validation error"


class MsgType(str, Enum):
    """FIX MsgType (tag 35) values."""

    Heartbeat = "0"
    TestRequest = "1"
    ResendRequest = "2"
    Reject = "3"
    SequenceReset = "4"
    Logout = "5"
    ExecutionReport = "8"
    OrderCancelReject = "9"
    Logon = "A"
    NewOrderSingle = "D"
    OrderCancelRequest = "F"
    OrderCancelReplaceRequest = "G"
    OrderStatusRequest = "H"
    MarketDataRequest = "V"
    MarketDataSnapshotFullRefresh = "W"
    MarketDataIncrementalRefresh = "X"
    MarketDataRequestReject = "Y"
    SecurityStatusRequest = "e"
    SecurityStatus = "f"
    OrderMassCancelRequest = "q"
    OrderMassCancelReport = "r"
    SecurityListRequest = "x"
    SecurityList = "y"
    OrderMassStatusRequest = "AF"

    def __str__(self) -> str:
        return self.value


def format_number(value: int | float) -> str:
    """Render a number as a FIX field value: no exponent, no trailing '.0'."""
    if isinstance(value, bool):
        raise TypeError("booleans are not numbers in FIX fields")
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as a UTC FIX time, YYYYMMDD-HH:MM:SS.sss."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return f"{value:%Y%m%d-%H:%M:%S}.{value.microsecond // 1000:03d}"


def _field_text(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    return str(value)


@dataclass(frozen=True)
class FixMessage:
    """A complete FIX message: ordered (tag, value) pairs including 8, 9 and 10."""

    fields: tuple[tuple[int, str], ...]

    def has_field(self, tag: int) -> bool:
        return any(t == tag for t, _ in self.fields)

    def get_field(self, tag: int) -> str | None:
        """Value of the first occurrence of ``tag``, or None."""
        return next((v for t, v in self.fields if t == tag), None)

    def get_all(self, tag: int) -> list[str]:
        """Values of every occurrence of ``tag``, in order."""
        return [v for t, v in self.fields if t == tag]

    @property
    def msg_type(self) -> str | None:
        return self.get_field(_TAG_MSG_TYPE)

    def to_bytes(self) -> bytes:
        return str(self).encode()

    def __str__(self) -> str:
        return "".join(f"{tag}={value}{SOH}" for tag, value in self.fields)


class MessageBuilder:
    """Chainable assembler of FIX 4.4 messages."""

    def __init__(self) -> None:
        self._header: dict[int, str] = {}
        self._body: list[tuple[int, str]] = []

    def msg_type(self, msg_type: MsgType | str) -> MessageBuilder:
        self._header[_TAG_MSG_TYPE] = MsgType(msg_type).value
        return self

    def sender_comp_id(self, sender_comp_id: str) -> MessageBuilder:
        self._header[_TAG_SENDER_COMP_ID] = sender_comp_id
        return self

    def target_comp_id(self, target_comp_id: str) -> MessageBuilder:
        self._header[_TAG_TARGET_COMP_ID] = target_comp_id
        return self

    def msg_seq_num(self, msg_seq_num: int) -> MessageBuilder:
        if msg_seq_num < 0:
            raise ValidationError(f"MsgSeqNum must not be negative: {msg_seq_num}")
        self._header[_TAG_MSG_SEQ_NUM] = str(msg_seq_num)
        return self

    def sending_time(self, sending_time: datetime) -> MessageBuilder:
        self._header[_TAG_SENDING_TIME] = format_timestamp(sending_time)
        return self

    def field(self, tag: int, value: object) -> MessageBuilder:
        """Add a field; header tags replace the header value, others are appended."""
        if tag <= 0:
            raise ValidationError(f"invalid tag number: {tag}")
        if tag in _COMPUTED_TAGS:
            raise ValidationError(f"tag {tag} is computed when the message is built")
        text = _field_text(value)
        if tag in _HEADER_ORDER:
            self._header[tag] = text
        else:
            self._body.append((tag, text))
        return self

    def build(self) -> FixMessage:
        for tag, name in _REQUIRED_HEADER:
            if tag not in self._header:
                raise MessageConstructionError(f"{name} is required")
        header = dict(self._header)
        header.setdefault(_TAG_SENDING_TIME, format_timestamp(datetime.now(timezone.utc)))
        body_fields = [(tag, header[tag]) for tag in _HEADER_ORDER] + self._body
        for tag, value in body_fields:
            if SOH in value:
                raise MessageConstructionError(f"value of tag {tag} contains SOH")

        body_text = "".join(f"{tag}={value}{SOH}" for tag, value in body_fields)
        body_length = len(body_text.encode())
        prefix = f"{_TAG_BEGIN_STRING}={BEGIN_STRING}{SOH}{_TAG_BODY_LENGTH}={body_length}{SOH}"
        checksum = sum((prefix + body_text).encode()) % 256

        return FixMessage(
            (
                (_TAG_BEGIN_STRING, BEGIN_STRING),
                (_TAG_BODY_LENGTH, str(body_length)),
                *body_fields,
                (_TAG_CHECKSUM, f"{checksum:03d}"),
            )
        )