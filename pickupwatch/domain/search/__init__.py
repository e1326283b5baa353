from pickupwatch.domain.search.search_result import SearchResult
from pickupwatch.domain.search.search_state import SearchState
