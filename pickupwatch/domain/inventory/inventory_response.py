from typing import Annotated
from typing import Literal
from urllib.parse import urlsplit

from pydantic import AfterValidator
from pydantic import BaseModel
from pydantic import Field

from pickupwatch.util.constants.apple import AVAILABLE


def _check_url(value: str) -> str:
    parts = urlsplit(value)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"{value!r} is not an absolute http(s) URL")
    return value


UrlString = Annotated[str, AfterValidator(_check_url)]


class PartAvailability(BaseModel):
    store_pick_eligible: bool = Field(alias="storePickEligible")
    pickup_display: Literal["available", "unavailable"] = Field(
        alias="pickupDisplay"
    )
    part_number: str = Field(alias="partNumber")


class StoreRecord(BaseModel):
    store_name: str = Field(alias="storeName")
    store_distance_with_unit: str = Field(alias="storeDistanceWithUnit")
    reservation_url: UrlString = Field(alias="reservationUrl")
    make_reservation_url: UrlString | None = Field(
        default=None, alias="makeReservationUrl"
    )
    parts_availability: dict[str, PartAvailability] = Field(
        alias="partsAvailability"
    )

    def is_available(self, part_number: str) -> bool:
        availability = self.parts_availability.get(part_number)
        return (availability is not None
                and availability.pickup_display == AVAILABLE)


class PickupMessage(BaseModel):
    stores: list[StoreRecord]


class Content(BaseModel):
    pickup_message: PickupMessage = Field(alias="pickupMessage")


class Body(BaseModel):
    content: Content


class InventoryResponse(BaseModel):
    """
    Validated shape of a fulfillment-messages payload. Only the path down to
    the store list is checked; unrelated vendor fields are ignored.
    """
    body: Body

    @property
    def stores(self) -> list[StoreRecord]:
        return self.body.content.pickup_message.stores
