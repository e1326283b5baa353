from pickupwatch.action.action import Action
from pickupwatch.action.availability.check_availability_action import \
    CheckAvailabilityAction
from pickupwatch.manager.manager import Manager


class AvailabilityManager(Manager):

    def get_actions(self) -> list[Action]:
        return [
            CheckAvailabilityAction()
        ]
