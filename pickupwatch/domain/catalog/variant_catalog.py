from dataclasses import dataclass
from dataclasses import field

from pickupwatch.domain.catalog.variant_catalog_entry import VariantCatalogEntry
from pickupwatch.domain.catalog.variant_maps import ProductNameMap
from pickupwatch.domain.catalog.variant_maps import StorageLabelMap
from pickupwatch.util.constants.catalog import VARIANTS


@dataclass
class VariantCatalog:
    """
    Static part number catalog. Lookups are total: part numbers outside the
    catalog resolve to the default name and storage label.
    """
    part_numbers: list[str] = field(default_factory=lambda: list(VARIANTS))
    names: ProductNameMap = field(default_factory=ProductNameMap)
    storage_labels: StorageLabelMap = field(default_factory=StorageLabelMap)

    def entry(self, part_number: str) -> VariantCatalogEntry:
        return VariantCatalogEntry(
            part_number=part_number,
            name=self.names.get(part_number),
            storage=self.storage_labels.get(part_number)
        )

    def entries(self) -> list[VariantCatalogEntry]:
        return [self.entry(part_number) for part_number in self.part_numbers]
