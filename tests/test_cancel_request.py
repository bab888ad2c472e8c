import pytest

from deribitfix.cancel_request import OrderCancelRequest
from deribitfix.fix import DeribitFixError, ValidationError


def fields(message: str) -> dict[int, str]:
    result = {}
    for part in message.split("\x01"):
        if part:
            tag, _, value = part.partition("=")
            result[int(tag)] = value
    return result


def test_by_orig_cl_ord_id():
    request = OrderCancelRequest.by_orig_cl_ord_id("ORIG123")
    assert request.orig_cl_ord_id == "ORIG123"
    assert request.cl_ord_id is None
    assert request.deribit_label is None
    assert request.symbol is None


def test_by_cl_ord_id():
    request = OrderCancelRequest.by_cl_ord_id("ORDER123", "BTC-PERPETUAL")
    assert request.cl_ord_id == "ORDER123"
    assert request.symbol == "BTC-PERPETUAL"
    assert request.orig_cl_ord_id is None
    assert request.deribit_label is None


def test_by_deribit_label():
    request = OrderCancelRequest.by_deribit_label("my-order", "BTC-PERPETUAL")
    assert request.deribit_label == "my-order"
    assert request.symbol == "BTC-PERPETUAL"
    assert request.cl_ord_id is None
    assert request.orig_cl_ord_id is None


def test_with_currency():
    request = OrderCancelRequest.by_cl_ord_id("ORDER123", "BTC-PERPETUAL").with_currency("BTC")
    assert request.currency == "BTC"
    assert request.cl_ord_id == "ORDER123"


def test_to_fix_message():
    message = OrderCancelRequest.by_orig_cl_ord_id("ORIG123").to_fix_message(
        "CLIENT", "DERIBITSERVER", 1
    )
    assert "35=F" in message
    assert "41=ORIG123" in message


def test_to_fix_message_by_label_with_currency():
    request = OrderCancelRequest.by_deribit_label("my-order", "BTC-PERPETUAL").with_currency("BTC")
    f = fields(request.to_fix_message("CLIENT", "DERIBITSERVER", 3))
    assert f[35] == "F"
    assert f[34] == "3"
    assert f[100010] == "my-order"
    assert f[55] == "BTC-PERPETUAL"
    assert f[15] == "BTC"
    assert 11 not in f
    assert 41 not in f


def test_validation_error():
    request = OrderCancelRequest()
    with pytest.raises(ValidationError):
        request.to_fix_message("CLIENT", "DERIBITSERVER", 1)


def test_validation_error_is_package_error():
    request = OrderCancelRequest(symbol="BTC-PERPETUAL", currency="BTC")
    with pytest.raises(DeribitFixError, match="OrigClOrdId or ClOrdId"):
        request.to_fix_message("CLIENT", "DERIBITSERVER", 1)