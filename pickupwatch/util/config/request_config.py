import os

from pickupwatch.util.constants.catalog import DEFAULT_REQUEST_DELAY_SECONDS
from pickupwatch.util.constants.catalog import REQUEST_DELAY_ENV_KEY
from pickupwatch.util.exceptions import ConfigurationError


def load_request_delay() -> float:
    """
    Courtesy delay in seconds between vendor requests, overridable through
    ``REQUEST_DELAY_SECONDS``.

    :raises ConfigurationError: if the override is not a non-negative number
    """
    value = os.getenv(REQUEST_DELAY_ENV_KEY)
    if not value:
        return DEFAULT_REQUEST_DELAY_SECONDS
    try:
        delay = float(value)
    except ValueError as e:
        raise ConfigurationError(
            f"{REQUEST_DELAY_ENV_KEY} must be a number of seconds, "
            f"got {value!r}"
        ) from e
    if delay < 0:
        raise ConfigurationError(
            f"{REQUEST_DELAY_ENV_KEY} must not be negative, got {value!r}"
        )
    return delay
