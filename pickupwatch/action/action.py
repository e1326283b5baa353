import logging
import re
import traceback
from abc import ABC
from abc import abstractmethod

from flask import request

from pickupwatch.util.aws import post_exception_to_sns


class Action(ABC):

    @property
    def route(self):
        name_ = self.__class__.__name__.replace("Action", "")
        name_ = re.sub(r'(?<!^)(?=[A-Z])', '-', name_).lower()
        return name_

    def trigger(self, request_: request):
        logging.info(f"Executing {self.route} due to request {request_}")
        try:
            return self.run(request_)
        except Exception as e:
            logging.error(
                f"Exception {e} thrown during {self.route} execution",
                exc_info=e.__traceback__
            )
            exception = traceback.format_exc()
            message = (f"Exception encountered during "
                       f"{self.__class__.__name__}\n\n\n{exception}")
            try:
                post_exception_to_sns(message)
            except Exception:
                logging.exception(
                    f"Unable to report {self.route} exception to SNS"
                )
            raise e

    @property
    def method(self):
        return "GET"

    @abstractmethod
    def run(self, request_: request):
        pass
