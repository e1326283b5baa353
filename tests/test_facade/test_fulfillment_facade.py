from unittest.mock import MagicMock

import pytest
import requests

from pickupwatch.domain.inventory import InventoryRequest
from pickupwatch.facade.apple import FulfillmentFacade
from pickupwatch.util.exceptions import VendorResponseError


def _mock_response(mock_request, payload=None, code=200, invalid_json=False):
    response = MagicMock()
    response.status_code = code
    response.text = "<html></html>"
    if invalid_json:
        response.json.side_effect = requests.JSONDecodeError(
            "Expecting value", "<html></html>", 0
        )
    else:
        response.json.return_value = payload
    mock_request.return_value = response
    return response


@pytest.fixture
def mock_request(mocker):
    return mocker.patch(
        "pickupwatch.facade.apple.fulfillment_facade.requests.request"
    )


def test_get_inventory_sends_query_parameters(
        mock_request, store_factory, payload_factory):
    _mock_response(mock_request, payload_factory(store_factory("Oakbrook")))

    FulfillmentFacade().get_inventory(
        InventoryRequest("New York, NY", "MU6E3LL/A")
    )

    kwargs = mock_request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "https://www.apple.com/shop/fulfillment-messages"
    assert kwargs["params"]["parts.0"] == "MU6E3LL/A"
    assert kwargs["params"]["location"] == "New York, NY"
    assert kwargs["params"]["cppart"] == "UNLOCKED/US"


def test_get_inventory_returns_validated_response(
        mock_request, store_factory, payload_factory):
    _mock_response(mock_request, payload_factory(
        store_factory("SoHo", "0.8 mi", {"MU6E3LL/A": "available"})
    ))

    facade = FulfillmentFacade()
    response = facade.get_inventory(
        InventoryRequest("New York, NY", "MU6E3LL/A")
    )

    assert response.stores[0].store_name == "SoHo"
    assert facade.status_code == 200


def test_get_inventory_raises_on_schema_mismatch(mock_request):
    _mock_response(mock_request, {"body": {"content": {}}})

    with pytest.raises(VendorResponseError) as exc_info:
        FulfillmentFacade().get_inventory(
            InventoryRequest("Chicago, IL", "MU693LL/A")
        )

    assert exc_info.value.part_number == "MU693LL/A"
    assert exc_info.value.location == "Chicago, IL"


def test_get_inventory_raises_on_invalid_json(mock_request):
    _mock_response(mock_request, code=503, invalid_json=True)

    facade = FulfillmentFacade()
    with pytest.raises(VendorResponseError):
        facade.get_inventory(InventoryRequest("Chicago, IL", "MU693LL/A"))

    assert facade.status_code == 503


def test_network_errors_propagate(mock_request):
    mock_request.side_effect = requests.ConnectionError("unreachable")

    with pytest.raises(requests.ConnectionError):
        FulfillmentFacade().get_inventory(
            InventoryRequest("Chicago, IL", "MU693LL/A")
        )
