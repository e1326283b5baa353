import logging

import boto3

from pickupwatch.util.constants.aws import DEFAULT_REGION
from pickupwatch.util.constants.aws import SESSION_PARAMETERS
from pickupwatch.util.constants.aws import SNS_EXCEPTION_SUBJECT
from pickupwatch.util.constants.aws import SNS_EXCEPTION_TOPIC_ARN

logger = logging.getLogger(__name__)

boto3_session = boto3.Session(**SESSION_PARAMETERS)


def post_exception_to_sns(exception_message):
    sns = boto3_session.client("sns", DEFAULT_REGION)
    sns.publish(TopicArn=SNS_EXCEPTION_TOPIC_ARN,
                Message=exception_message,
                Subject=SNS_EXCEPTION_SUBJECT)
    logger.info("Posted exception report to %s", SNS_EXCEPTION_TOPIC_ARN)
