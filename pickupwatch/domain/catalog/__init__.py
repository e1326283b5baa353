from pickupwatch.domain.catalog.variant_catalog import VariantCatalog
from pickupwatch.domain.catalog.variant_catalog_entry import VariantCatalogEntry
