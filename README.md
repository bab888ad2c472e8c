# deribitfix

Build FIX 4.4 messages for the Deribit exchange from plain Python objects.

The package has no dependencies beyond the standard library and needs
Python 3.10 or later.

## What is in it

- `deribitfix.fix`: the `MessageBuilder`, which writes the standard header
  (BeginString, BodyLength, MsgType, SenderCompID, TargetCompID, MsgSeqNum,
  SendingTime), your body fields in the order added, and the checksum; the
  resulting `FixMessage`; the `MsgType` enumeration; the helpers
  `format_number` and `format_timestamp`; and the errors `DeribitFixError`,
  `MessageConstructionError` and `ValidationError`.
- `deribitfix.order_types`: `OrderSide`, `OrderType`, `TimeInForce`,
  `OrderStatus`, `OrderRejectReason`, `MassCancelRequestType`,
  `MassStatusRequestType`, `MassStatusRequestIdType`, `QuantityType`.
- Order messages: `NewOrderSingle` (`deribitfix.new_order`),
  `OrderCancelRequest` (`deribitfix.cancel_request`), `OrderCancelReject`
  (`deribitfix.cancel_reject`), `OrderMassStatusRequest`
  (`deribitfix.mass_status`), `OrderMassCancelRequest` and
  `OrderMassCancelReport` (`deribitfix.mass_cancel`).
- Market data: `MarketDataRequest`, `MarketDataRequestReject`,
  `MarketDataSnapshotFullRefresh`, `MarketDataIncrementalRefresh`
  (`deribitfix.market_data`), with `MdEntry` and the enumerations
  `MdSubscriptionRequestType`, `MdUpdateType`, `MdEntryType`,
  `MdUpdateAction`, `MdReqRejReason` (`deribitfix.market_data_types`).

Message objects are frozen dataclasses. Their `with_*` methods (and
`post_only`, `reduce_only`, `post_only_reduce_only` on orders) return a
modified copy. Each message's `to_fix_message(sender_comp_id,
target_comp_id, msg_seq_num)` returns the raw SOH-delimited FIX string.

## Usage

A limit order:

```python
from deribitfix.new_order import NewOrderSingle
from deribitfix.order_types import OrderSide, TimeInForce

order = (
    NewOrderSingle.limit("ORDER123", OrderSide.Buy, 10.0, 50000.0, "BTC-PERPETUAL")
    .with_label("my-order")
    .with_time_in_force(TimeInForce.GoodTillCancelled)
    .post_only()
)
raw = order.to_fix_message("CLIENT", "DERIBITSERVER", 1)
# raw contains "35=D", "54=1", "38=10", "44=50000", "18=6", "100010=my-order"
```

Cancelling an order by the identifier Deribit gave it:

```python
from deribitfix.cancel_request import OrderCancelRequest

raw = OrderCancelRequest.by_orig_cl_ord_id("ORIG123").to_fix_message(
    "CLIENT", "DERIBITSERVER", 2
)
```

Cancelling all orders in one currency:

```python
from deribitfix.mass_cancel import OrderMassCancelRequest

raw = (
    OrderMassCancelRequest.all_orders("MASS123")
    .with_currency("BTC")
    .with_freeze_quotes(True)
    .to_fix_message("CLIENT", "DERIBITSERVER", 3)
)
```

Subscribing to the order book:

```python
from deribitfix.market_data import MarketDataRequest
from deribitfix.market_data_types import MdEntryType, MdUpdateType

request = MarketDataRequest.subscription(
    "REQ1",
    ["BTC-PERPETUAL"],
    [MdEntryType.Bid, MdEntryType.Offer],
    MdUpdateType.IncrementalRefresh,
)
raw = request.to_fix_message("CLIENT", "DERIBITSERVER", 4)
```

Other messages go through the builder directly:

```python
from deribitfix.fix import MessageBuilder, MsgType

message = (
    MessageBuilder()
    .msg_type(MsgType.TestRequest)
    .sender_comp_id("CLIENT")
    .target_comp_id("DERIBIT")
    .msg_seq_num(1)
    .field(112, "TEST123")
    .build()
)
assert message.get_field(112) == "TEST123"
assert message.get_field(8) == "FIX.4.4"
wire = str(message)        # SOH-delimited, checksum included
data = message.to_bytes()  # the same, encoded
```

If no sending time is given, `build()` uses the current UTC time. Setting a
header tag again replaces its value; other tags are appended, so repeating
groups keep their order. `FixMessage.get_all(tag)` returns every value of a
repeated tag.

## Errors

All errors derive from `deribitfix.fix.DeribitFixError`.

- `ValidationError` is raised when a message breaks a rule: a cancel request
  with no order identifier, a mass cancel by symbol, security type or label
  without that value, a mass status search by ClOrdID or label without a
  currency or symbol, a negative sequence number, or a builder field with a
  tag that is not positive or is one of the computed tags 8, 9 and 10.
- `MessageConstructionError` is raised by `MessageBuilder.build()` when
  MsgType, SenderCompID, TargetCompID or MsgSeqNum is missing, or when a
  field value contains the SOH character.

## What it does not do

This package only builds outgoing messages. It does not open connections,
log on, run a FIX session (heartbeats, sequence tracking, resends), or parse
messages received from the exchange.

## Running the tests

```
pip install -e ".[test]"
pytest
```