import os
from dataclasses import dataclass

from pickupwatch.util.constants.pushover import TOKEN_ENV_KEY
from pickupwatch.util.constants.pushover import USER_KEY_ENV_KEY
from pickupwatch.util.exceptions import MissingConfigurationError


@dataclass(frozen=True)
class NotificationConfig:
    token: str
    user_key: str

    def as_params(self) -> dict[str, str]:
        return {"token": self.token, "user": self.user_key}


def get_required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise MissingConfigurationError(name)
    return value


def load_notification_config() -> NotificationConfig:
    """
    Reads the Pushover credentials from the process environment. Called at
    dispatch time so a changed environment is picked up on the next run.

    :return: notification credentials
    :raises MissingConfigurationError: if either value is absent or empty
    """
    return NotificationConfig(
        token=get_required_env(TOKEN_ENV_KEY),
        user_key=get_required_env(USER_KEY_ENV_KEY)
    )
