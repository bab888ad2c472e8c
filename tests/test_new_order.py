from datetime import datetime, timezone

import pytest

from deribitfix.fix import ValidationError
from deribitfix.new_order import NewOrderSingle
from deribitfix.order_types import OrderSide, OrderType, QuantityType, TimeInForce


def parse(message: str) -> list[tuple[int, str]]:
    pairs = []
    for part in message.split("\x01"):
        if part:
            tag, _, value = part.partition("=")
            pairs.append((int(tag), value))
    return pairs


def fields(message: str) -> dict[int, str]:
    return dict(parse(message))


def limit_order() -> NewOrderSingle:
    return NewOrderSingle.limit("ORDER123", OrderSide.Buy, 10.0, 50000.0, "BTC-PERPETUAL")


def test_market_creation():
    order = NewOrderSingle.market("ORDER123", OrderSide.Buy, 10.0, "BTC-PERPETUAL")
    assert order.cl_ord_id == "ORDER123"
    assert order.side == OrderSide.Buy
    assert order.order_qty == 10.0
    assert order.price == 0.0
    assert order.symbol == "BTC-PERPETUAL"
    assert order.ord_type == OrderType.Market


def test_limit_creation():
    order = NewOrderSingle.limit("ORDER456", OrderSide.Sell, 5.0, 50000.0, "BTC-PERPETUAL")
    assert order.cl_ord_id == "ORDER456"
    assert order.side == OrderSide.Sell
    assert order.order_qty == 5.0
    assert order.price == 50000.0
    assert order.symbol == "BTC-PERPETUAL"
    assert order.ord_type == OrderType.Limit


def test_with_label():
    order = NewOrderSingle.limit("ORDER789", OrderSide.Buy, 1.0, 45000.0, "BTC-PERPETUAL")
    assert order.with_label("my-order").deribit_label == "my-order"


def test_post_only():
    order = NewOrderSingle.limit("ORDER101", OrderSide.Buy, 1.0, 45000.0, "BTC-PERPETUAL")
    assert order.post_only().exec_inst == "6"


def test_reduce_only():
    order = NewOrderSingle.limit("ORDER102", OrderSide.Sell, 1.0, 55000.0, "BTC-PERPETUAL")
    assert order.reduce_only().exec_inst == "E"


def test_post_only_reduce_only():
    assert limit_order().post_only_reduce_only().exec_inst == "6E"


def test_modifiers_return_copies():
    order = limit_order()
    labelled = order.with_label("x")
    assert order.deribit_label is None
    assert labelled.deribit_label == "x"


def test_to_fix_message():
    message = limit_order().with_label("test-order").to_fix_message("CLIENT", "DERIBITSERVER", 1)
    assert "35=D" in message
    assert "11=ORDER123" in message
    assert "54=1" in message
    assert "38=10" in message
    assert "44=50000" in message
    assert "55=BTC-PERPETUAL" in message
    assert "100010=test-order" in message


def test_to_fix_message_exact_values():
    f = fields(limit_order().to_fix_message("CLIENT", "DERIBITSERVER", 7))
    assert f[35] == "D"
    assert f[49] == "CLIENT"
    assert f[56] == "DERIBITSERVER"
    assert f[34] == "7"
    assert f[38] == "10"
    assert f[44] == "50000"
    assert f[40] == "2"
    assert 100010 not in f
    assert 18 not in f


def test_market_order_price_zero():
    order = NewOrderSingle.market("M1", OrderSide.Sell, 2.5, "ETH-PERPETUAL")
    f = fields(order.to_fix_message("CLIENT", "DERIBITSERVER", 1))
    assert f[44] == "0"
    assert f[38] == "2.5"
    assert f[54] == "2"
    assert f[40] == "1"


def test_optional_fields_rendered():
    order = (
        limit_order()
        .post_only_reduce_only()
        .with_time_in_force(TimeInForce.ImmediateOrCancel)
        .with_stop_price(49000.5)
        .with_display_qty(1.0)
        .with_qty_type(QuantityType.Contracts)
        .with_mmp(True)
    )
    f = fields(order.to_fix_message("CLIENT", "DERIBITSERVER", 1))
    assert f[18] == "6E"
    assert f[59] == "3"
    assert f[99] == "49000.5"
    assert f[1138] == "1"
    assert f[854] == "1"
    assert f[9008] == "Y"


def test_mmp_disabled_is_n():
    f = fields(limit_order().with_mmp(False).to_fix_message("C", "S", 1))
    assert f[9008] == "N"


def test_valid_until_time_format():
    order = NewOrderSingle(
        cl_ord_id="V1",
        side=OrderSide.Buy,
        order_qty=1.0,
        price=100.0,
        symbol="BTC-PERPETUAL",
        valid_until_time=datetime(2025, 7, 22, 10, 30, 15, 123000, tzinfo=timezone.utc),
    )
    f = fields(order.to_fix_message("C", "S", 1))
    assert f[62] == "20250722-10:30:15.123"


def test_checksum_and_body_length():
    message = limit_order().to_fix_message("CLIENT", "DERIBITSERVER", 1)
    pairs = parse(message)
    assert pairs[0] == (8, "FIX.4.4")
    assert pairs[-1][0] == 10
    body = message.split("\x01", 2)[2]
    body = body[: body.rindex("10=")]
    assert int(pairs[1][1]) == len(body.encode())
    head = message[: message.rindex("10=")]
    assert int(pairs[-1][1]) == sum(head.encode()) % 256


def test_negative_sequence_number_rejected():
    with pytest.raises(ValidationError):
        limit_order().to_fix_message("C", "S", -1)