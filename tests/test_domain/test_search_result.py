import pytest

from pickupwatch.domain.inventory import AvailableStore
from pickupwatch.domain.search import SearchResult
from pickupwatch.domain.search import SearchState


def test_new_result_is_searching():
    result = SearchResult()
    assert result.state == SearchState.SEARCHING
    with pytest.raises(ValueError):
        result.to_response()


def test_found_response():
    store = AvailableStore("Pioneer Place", "0.3 mi", "https://e.com",
                           "iPhone 15 Pro", "512gb")
    result = SearchResult()

    result.found("Portland, OR", [store])

    assert result.state == SearchState.FOUND
    assert result.to_response() == {
        "city": "Portland, OR",
        "stores": [store.to_dict()],
    }


def test_exhausted_response():
    result = SearchResult()

    result.exhausted()

    assert result.state == SearchState.EXHAUSTED
    assert result.to_response() == {
        "message": "No stores with iPhone 15 Pro MAX available at the moment"
    }
