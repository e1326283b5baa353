import logging

import requests

from pickupwatch.domain.generic import HTTPMethods
from pickupwatch.domain.notification import NotificationPayload
from pickupwatch.util.config import NotificationConfig
from pickupwatch.util.constants.pushover import PUSHOVER_MESSAGES_URL

logger = logging.getLogger(__name__)


class PushoverFacade:

    def __init__(self, base_url: str = PUSHOVER_MESSAGES_URL):
        self._baseURL = base_url

    def send_message(self, config: NotificationConfig,
                     payload: NotificationPayload):
        """
        Posts a single message with every field as a query parameter. The
        response is logged but otherwise ignored.

        :param config: Pushover credentials
        :param payload: message content
        """
        http_response = requests.request(
            method=HTTPMethods.POST.value,
            url=self._baseURL,
            params={**config.as_params(), **payload.as_params()}
        )
        logger.info(
            "Pushover responded with status %s for \"%s\"",
            http_response.status_code,
            payload.title,
        )
