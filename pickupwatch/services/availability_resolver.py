import logging
import time
from typing import Callable
from typing import Iterator

from pickupwatch.domain.catalog import VariantCatalog
from pickupwatch.domain.inventory import AvailableStore
from pickupwatch.domain.inventory import InventoryRequest
from pickupwatch.domain.inventory import InventoryResponse
from pickupwatch.facade.apple import FulfillmentFacade
from pickupwatch.util.config import load_request_delay


class AvailabilityResolver:
    """
    Queries the fulfillment endpoint one part number at a time for a
    location and collects the stores offering same-day pickup.
    """

    def __init__(
            self,
            fulfillment: FulfillmentFacade | None = None,
            catalog: VariantCatalog | None = None,
            delay_seconds: float | None = None,
            sleep: Callable[[float], None] = time.sleep,
            logger: logging.Logger | None = None,
    ):
        self.fulfillment = fulfillment or FulfillmentFacade()
        self.catalog = catalog or VariantCatalog()
        self.delay_seconds = delay_seconds
        self.sleep = sleep
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def iter_requests(location: str,
                      part_numbers: list[str]) -> Iterator[InventoryRequest]:
        for part_number in part_numbers:
            yield InventoryRequest(location=location, part_number=part_number)

    def resolve(self, location: str,
                part_numbers: list[str]) -> list[AvailableStore]:
        delay_seconds = (
            self.delay_seconds if self.delay_seconds is not None
            else load_request_delay()
        )
        available_stores: list[AvailableStore] = []
        for inventory_request in self.iter_requests(location, part_numbers):
            self.logger.debug(
                "Checking %s at %s",
                inventory_request.part_number, location
            )
            response = self.fulfillment.get_inventory(inventory_request)
            current_available_stores = self.extract_available_stores(
                response, inventory_request.part_number
            )
            if current_available_stores:
                self.logger.info(
                    "%s available at %s store(s) near %s",
                    inventory_request.part_number,
                    len(current_available_stores),
                    location,
                )
            available_stores.extend(current_available_stores)
            self.sleep(delay_seconds)
        return available_stores

    def extract_available_stores(self, response: InventoryResponse,
                                 part_number: str) -> list[AvailableStore]:
        variant = self.catalog.entry(part_number)
        return [
            AvailableStore.from_store_record(store, variant)
            for store in response.stores
            if store.is_available(part_number)
        ]
