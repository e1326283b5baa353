from dataclasses import dataclass


@dataclass(frozen=True)
class VariantCatalogEntry:
    part_number: str
    name: str
    storage: str
