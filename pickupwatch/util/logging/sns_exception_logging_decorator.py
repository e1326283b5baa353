import functools
import logging
import traceback

from pickupwatch.util import aws


def log_exceptions(func):
    """
    Logs and reports any exception raised by ``func`` to SNS, then re-raises
    it so the caller still sees the failure.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logging.error(
                f"Exception {e} thrown during {func.__name__}",
                exc_info=e.__traceback__
            )
            message = (f"Exception encountered during {func.__name__}\n\n\n"
                       f"{traceback.format_exc()}")
            try:
                aws.post_exception_to_sns(message)
            except Exception:
                logging.exception(
                    f"Unable to report {func.__name__} exception to SNS"
                )
            raise e

    return wrapper
