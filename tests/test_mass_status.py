import pytest

from deribitfix.fix import ValidationError
from deribitfix.mass_status import OrderMassStatusRequest
from deribitfix.order_types import MassStatusRequestIdType, MassStatusRequestType


def _fields(message: str) -> dict[int, str]:
    pairs = (item.split("=", 1) for item in message.split("\x01") if item)
    return {int(tag): value for tag, value in pairs}


def test_all_orders():
    request = OrderMassStatusRequest.all_orders("STATUS123")
    assert request.mass_status_req_id == "STATUS123"
    assert request.mass_status_req_type == MassStatusRequestType.AllOrders
    assert request.mass_status_req_id_type is None
    assert request.currency is None
    assert request.symbol is None


def test_specific_order_by_orig_cl_ord_id():
    request = OrderMassStatusRequest.specific_order_by_orig_cl_ord_id("ORIG123")
    assert request.mass_status_req_id == "ORIG123"
    assert request.mass_status_req_type == MassStatusRequestType.SpecificOrder
    assert request.mass_status_req_id_type == MassStatusRequestIdType.OrigClOrdId


def test_specific_order_by_cl_ord_id():
    request = OrderMassStatusRequest.specific_order_by_cl_ord_id("ORDER123", "BTC", None)
    assert request.mass_status_req_id == "ORDER123"
    assert request.mass_status_req_type == MassStatusRequestType.AllOrders
    assert request.mass_status_req_id_type == MassStatusRequestIdType.ClOrdId
    assert request.currency == "BTC"


def test_specific_order_by_deribit_label():
    request = OrderMassStatusRequest.specific_order_by_deribit_label(
        "my-order", None, "BTC-PERPETUAL"
    )
    assert request.mass_status_req_id == "my-order"
    assert request.mass_status_req_type == MassStatusRequestType.AllOrders
    assert request.mass_status_req_id_type == MassStatusRequestIdType.DeribitLabel
    assert request.symbol == "BTC-PERPETUAL"


def test_with_currency_and_symbol():
    request = (
        OrderMassStatusRequest.all_orders("STATUS456")
        .with_currency("BTC")
        .with_symbol("BTC-PERPETUAL")
    )
    assert request.currency == "BTC"
    assert request.symbol == "BTC-PERPETUAL"


def test_to_fix_message():
    message = OrderMassStatusRequest.all_orders("STATUS123").to_fix_message(
        "CLIENT", "DERIBITSERVER", 1
    )
    assert "35=AF" in message
    assert "584=STATUS123" in message
    assert "585=7" in message
    assert 9014 not in _fields(message)


def test_specific_order_to_fix_message():
    message = OrderMassStatusRequest.specific_order_by_orig_cl_ord_id(
        "ORIG123"
    ).to_fix_message("CLIENT", "DERIBITSERVER", 1)
    fields = _fields(message)
    assert fields[35] == "AF"
    assert fields[584] == "ORIG123"
    assert fields[585] == "1"
    assert fields[9014] == "0"


def test_validation_error_by_cl_ord_id():
    request = OrderMassStatusRequest.specific_order_by_cl_ord_id("ORDER123", None, None)
    with pytest.raises(ValidationError):
        request.to_fix_message("CLIENT", "DERIBITSERVER", 1)


def test_validation_error_by_deribit_label():
    request = OrderMassStatusRequest.specific_order_by_deribit_label("my-order", None, None)
    with pytest.raises(ValidationError):
        request.to_fix_message("CLIENT", "DERIBITSERVER", 1)


def test_with_deribit_label_and_symbol():
    message = OrderMassStatusRequest.specific_order_by_deribit_label(
        "my-order", None, "BTC-PERPETUAL"
    ).to_fix_message("CLIENT", "DERIBITSERVER", 1)
    assert "35=AF" in message
    assert "584=my-order" in message
    assert "585=7" in message
    assert "9014=2" in message
    assert "55=BTC-PERPETUAL" in message


def test_currency_uses_tag_15():
    fields = _fields(
        OrderMassStatusRequest.specific_order_by_cl_ord_id("ORDER1", "ETH", None).to_fix_message(
            "CLIENT", "DERIBITSERVER", 4
        )
    )
    assert fields[15] == "ETH"
    assert fields[9014] == "1"
    assert fields[34] == "4"