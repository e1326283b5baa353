import logging

from pickupwatch.domain.inventory import AvailableStore
from pickupwatch.domain.notification import NotificationPayload
from pickupwatch.facade.pushover import PushoverFacade
from pickupwatch.util.config import load_notification_config


class Notifier:

    def __init__(
            self,
            pushover: PushoverFacade | None = None,
            logger: logging.Logger | None = None,
    ):
        self.pushover = pushover or PushoverFacade()
        self.logger = logger or logging.getLogger(__name__)

    def notify(self, location: str, stores: list[AvailableStore]):
        if not stores:
            raise ValueError("notify requires at least one available store")
        config = load_notification_config()
        payload = NotificationPayload.from_stores(location, stores)
        self.logger.info(
            "Sending notification for %s store(s) in %s",
            len(stores), location
        )
        self.pushover.send_message(config, payload)
