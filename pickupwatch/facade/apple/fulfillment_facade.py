import logging

import requests
from pydantic import ValidationError
from requests import JSONDecodeError

from pickupwatch.domain.generic import HTTPMethods
from pickupwatch.domain.inventory import InventoryRequest
from pickupwatch.domain.inventory import InventoryResponse
from pickupwatch.util.constants.apple import FULFILLMENT_MESSAGES_URL
from pickupwatch.util.exceptions import VendorResponseError

logger = logging.getLogger(__name__)


class FulfillmentFacade:
    """Client for the Apple Store fulfillment-messages endpoint."""

    def __init__(self, base_url: str = FULFILLMENT_MESSAGES_URL):
        self._baseURL = base_url
        self.status_code = 0

    def _request(self, params: dict[str, str],
                 method: HTTPMethods = HTTPMethods.GET) -> dict:
        http_response = requests.request(
            method=method.value,
            url=self._baseURL,
            params=params
        )
        self.status_code = http_response.status_code
        return http_response.json()

    def get_inventory(self, inventory_request: InventoryRequest
                      ) -> InventoryResponse:
        """
        Fetches and validates pickup availability for one part at one
        location. There is no retry; any failure ends the caller's run.

        :param inventory_request: location and part number to query
        :return: validated inventory response
        :raises VendorResponseError: if the body is not JSON or does not match
            the expected shape
        """
        try:
            payload = self._request(inventory_request.params)
        except JSONDecodeError as e:
            logger.error(
                "Fulfillment response for %s at %s was not JSON (status %s)",
                inventory_request.part_number,
                inventory_request.location,
                self.status_code,
            )
            raise VendorResponseError(
                "Inventory response was not valid JSON",
                inventory_request.part_number,
                inventory_request.location
            ) from e

        try:
            return InventoryResponse.model_validate(payload)
        except ValidationError as e:
            logger.error(
                "Fulfillment response for %s at %s failed validation: %s",
                inventory_request.part_number,
                inventory_request.location,
                e,
            )
            raise VendorResponseError(
                "Inventory response did not match the expected schema",
                inventory_request.part_number,
                inventory_request.location
            ) from e
