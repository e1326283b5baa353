from dataclasses import dataclass

from pickupwatch.domain.catalog import VariantCatalogEntry
from pickupwatch.domain.inventory.inventory_response import StoreRecord


@dataclass
class AvailableStore:
    name: str
    distance: str
    reservation_url: str
    model: str
    storage: str

    @classmethod
    def from_store_record(cls, store: StoreRecord,
                          variant: VariantCatalogEntry) -> "AvailableStore":
        return cls(
            name=store.store_name,
            distance=store.store_distance_with_unit,
            reservation_url=store.reservation_url,
            model=variant.name,
            storage=variant.storage
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "distance": self.distance,
            "reservationUrl": self.reservation_url,
            "model": self.model,
            "storage": self.storage
        }
