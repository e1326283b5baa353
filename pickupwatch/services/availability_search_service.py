import logging

from pickupwatch.domain.search import SearchResult
from pickupwatch.domain.search import SearchState
from pickupwatch.services.availability_resolver import AvailabilityResolver
from pickupwatch.services.notifier import Notifier
from pickupwatch.util.constants.catalog import LOCATIONS
from pickupwatch.util.constants.catalog import VARIANTS


class AvailabilitySearchService:
    """
    Searches the candidate locations in priority order, stopping at the first
    one with any available store, and notifies once for that location.
    """

    def __init__(
            self,
            resolver: AvailabilityResolver | None = None,
            notifier: Notifier | None = None,
            locations: list[str] | None = None,
            part_numbers: list[str] | None = None,
            logger: logging.Logger | None = None,
    ):
        self.resolver = resolver or AvailabilityResolver()
        self.notifier = notifier or Notifier()
        self.locations = locations if locations is not None else LOCATIONS
        self.part_numbers = (
            part_numbers if part_numbers is not None else VARIANTS
        )
        self.logger = logger or logging.getLogger(__name__)

    def run(self) -> SearchResult:
        self.logger.info(
            "Starting availability search across %s", self.locations
        )
        result = self.search()
        if result.state == SearchState.FOUND:
            self.notifier.notify(result.location, result.stores)
        else:
            self.logger.info("No availability found in any location")
        return result

    def search(self) -> SearchResult:
        result = SearchResult()
        for location in self.locations:
            stores = self.resolver.resolve(location, self.part_numbers)
            if stores:
                self.logger.info(
                    "Found %s available store(s) in %s", len(stores), location
                )
                result.found(location, stores)
                return result
            self.logger.debug("Nothing available in %s", location)
        result.exhausted()
        return result
