from dataclasses import dataclass

from pickupwatch.util.constants.apple import FULFILLMENT_BASE_PARAMS
from pickupwatch.util.constants.apple import LOCATION_PARAM
from pickupwatch.util.constants.apple import PART_PARAM


@dataclass(frozen=True)
class InventoryRequest:
    location: str
    part_number: str

    @property
    def params(self) -> dict[str, str]:
        return {
            **FULFILLMENT_BASE_PARAMS,
            PART_PARAM: self.part_number,
            LOCATION_PARAM: self.location
        }
