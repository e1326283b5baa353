from dataclasses import dataclass
from dataclasses import field

from pickupwatch.domain.generic import DefaultMap
from pickupwatch.util.constants.catalog import DEFAULT_PRODUCT_NAME
from pickupwatch.util.constants.catalog import DEFAULT_STORAGE_LABEL
from pickupwatch.util.constants.catalog import PRODUCT_NAMES
from pickupwatch.util.constants.catalog import STORAGE_LABELS


@dataclass
class ProductNameMap(DefaultMap):
    default: str = DEFAULT_PRODUCT_NAME
    part_map: dict = field(default_factory=lambda: dict(PRODUCT_NAMES))

    @property
    def _map(self) -> dict[str, any] | None:
        return self.part_map


@dataclass
class StorageLabelMap(DefaultMap):
    default: str = DEFAULT_STORAGE_LABEL
    part_map: dict = field(default_factory=lambda: dict(STORAGE_LABELS))

    @property
    def _map(self) -> dict[str, any] | None:
        return self.part_map
