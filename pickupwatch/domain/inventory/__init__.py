from pickupwatch.domain.inventory.available_store import AvailableStore
from pickupwatch.domain.inventory.inventory_request import InventoryRequest
from pickupwatch.domain.inventory.inventory_response import InventoryResponse
from pickupwatch.domain.inventory.inventory_response import PartAvailability
from pickupwatch.domain.inventory.inventory_response import StoreRecord
