from dataclasses import dataclass
from dataclasses import field

from pickupwatch.domain.inventory import AvailableStore
from pickupwatch.domain.search.search_state import SearchState
from pickupwatch.util.constants.catalog import NO_AVAILABILITY_MESSAGE


@dataclass
class SearchResult:
    state: SearchState = SearchState.SEARCHING
    location: str | None = None
    stores: list[AvailableStore] = field(default_factory=list)

    def found(self, location: str, stores: list[AvailableStore]):
        self.state = SearchState.FOUND
        self.location = location
        self.stores = stores

    def exhausted(self):
        self.state = SearchState.EXHAUSTED

    def to_response(self) -> dict:
        if self.state == SearchState.FOUND:
            return {
                "city": self.location,
                "stores": [store.to_dict() for store in self.stores]
            }
        if self.state == SearchState.EXHAUSTED:
            return {"message": NO_AVAILABILITY_MESSAGE}
        raise ValueError(f"Search has not finished (state {self.state.value})")
