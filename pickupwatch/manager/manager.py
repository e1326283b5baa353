import logging
import re
from abc import ABC

from flask import Blueprint
from flask import request

from pickupwatch.action.action import Action


class Manager(ABC):

    def __init__(self):
        self.blueprint = Blueprint(
            self.name,
            __name__,
            url_prefix=f"/ms/{self.name}"
        )
        self._register_actions()

    @property
    def name(self):
        name_ = self.__class__.__name__.replace("Manager", "")
        name_ = re.sub(r'(?<!^)(?=[A-Z])', '-', name_).lower()
        return name_

    def get_actions(self) -> list[Action]:
        return []

    @staticmethod
    def make_handler(action_):
        def handler():
            try:
                return action_.trigger(request)
            except Exception as e:
                logging.error(
                    f"Exception {e} thrown during {action_.route}",
                    exc_info=e.__traceback__
                )
                return {"error": str(e)}, 500

        return handler

    def _register_actions(self):
        for action in self.get_actions():
            route = getattr(action, "route")
            method = getattr(action, "method")

            self.blueprint.add_url_rule(
                f"/{route}",
                view_func=self.make_handler(action),
                methods=[method],
                endpoint=route
            )

        self.blueprint.add_url_rule("", view_func=lambda: self.list(),
                                    methods=["GET"], )

    def list(self):
        if self.get_actions():
            return {
                "actions": [action.route for action in self.get_actions()]
            }
        return "No endpoints implemented for this process yet"
