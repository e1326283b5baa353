import logging
import os
import sys
from datetime import date

import watchtower

from pickupwatch.util.aws import boto3_session
from pickupwatch.util.constants.aws import DEFAULT_REGION
from pickupwatch.util.constants.aws import LOG_GROUP_NAME
from pickupwatch.util.logging.JsonLogFormatter import JsonLogFormatter
from pickupwatch.util.logging.sns_exception_logging_decorator import \
    log_exceptions


def _setup_json_handler(handler):
    handler.setFormatter(JsonLogFormatter())
    return handler


def set_up_logging():
    logging.basicConfig(**{
        "handlers": [
            _setup_json_handler(
                watchtower.CloudWatchLogHandler(
                    boto3_client=boto3_session.client(
                        "logs",
                        region_name=DEFAULT_REGION
                    ),
                    log_group_name=LOG_GROUP_NAME,
                    log_stream_name=f"application."
                                    f"{date.today().isoformat()}.log"
                )
            ),
            _setup_json_handler(
                logging.StreamHandler(sys.stdout)
            )
        ],
        "level": os.getenv("LOG_LEVEL", "INFO")
    })

    logging.info("Logging with JSON formatting and watchtower is active.")
