from enum import Enum


class SearchState(str, Enum):
    SEARCHING = "SEARCHING"
    FOUND = "FOUND"
    EXHAUSTED = "EXHAUSTED"
