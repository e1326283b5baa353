from dataclasses import dataclass

from pickupwatch.domain.inventory import AvailableStore
from pickupwatch.util.constants.apple import BUY_PAGE_URL
from pickupwatch.util.constants.apple import STORE_NAME_PREFIX
from pickupwatch.util.constants.catalog import PRODUCT_LINE
from pickupwatch.util.constants.pushover import HTML_ENABLED


@dataclass
class NotificationPayload:
    title: str
    message: str
    url: str
    url_title: str
    html: str = HTML_ENABLED

    @classmethod
    def from_stores(cls, location: str,
                    stores: list[AvailableStore]) -> "NotificationPayload":
        """
        Builds the payload around the first-ranked store, i.e. the first one
        discovered, while listing every store in the message body.

        :param location: location the stores were found for
        :param stores: non-empty list of available stores
        :return: notification payload
        """
        if not stores:
            raise ValueError("Cannot build a notification without stores")
        first_ranked_store = stores[0]
        store_links = ", ".join(cls._store_link(store) for store in stores)
        return cls(
            title=f"Available {PRODUCT_LINE} "
                  f"({first_ranked_store.storage.upper()}) in {location}",
            message=f"Available stores: {store_links}",
            url=BUY_PAGE_URL.format(storage=first_ranked_store.storage),
            url_title=f"Go to Apple website to make a reservation at "
                      f"{first_ranked_store.name} store "
                      f"({first_ranked_store.distance})"
        )

    @staticmethod
    def _store_link(store: AvailableStore) -> str:
        return (f"<a href=\"{store.reservation_url}\">{STORE_NAME_PREFIX} "
                f"{store.name} ({store.distance})</a>")

    def as_params(self) -> dict[str, str]:
        return {
            "title": self.title,
            "message": self.message,
            "html": self.html,
            "url": self.url,
            "url_title": self.url_title
        }
