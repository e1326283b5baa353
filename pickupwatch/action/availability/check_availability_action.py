import json
from dataclasses import dataclass
from dataclasses import field

from dotenv import load_dotenv
from flask import request

from pickupwatch.action.action import Action
from pickupwatch.services.availability_search_service import \
    AvailabilitySearchService
from pickupwatch.util.logging import log_exceptions


@dataclass
class CheckAvailabilityAction(Action):
    service: AvailabilitySearchService = field(
        default_factory=AvailabilitySearchService
    )

    def run(self, request_: request):
        return self.service.run().to_response()


@log_exceptions
def main():
    load_dotenv()
    result = CheckAvailabilityAction().run(None)
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
