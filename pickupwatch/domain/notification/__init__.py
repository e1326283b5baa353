from pickupwatch.domain.notification.notification_payload import \
    NotificationPayload
