from pickupwatch.util.config.notification_config import NotificationConfig
from pickupwatch.util.config.notification_config import \
    load_notification_config
from pickupwatch.util.config.request_config import load_request_delay
