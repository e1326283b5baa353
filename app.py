import logging

from dotenv import load_dotenv
from flask import Flask

from pickupwatch.manager.availability.availability_manager import \
    AvailabilityManager
from pickupwatch.manager.manager import Manager
from pickupwatch.util.logging import set_up_logging


class Server(Flask):
    service_name: str = "PickupWatchService"
    service_root: str = "/ms/"
    _registry: dict = None

    @property
    def registry(self):
        if not self._registry:
            return {m.name: m.list() for m in self.managers}
        else:
            return self._registry

    def __init__(self, managers: list[Manager] | None = None):
        super().__init__(self.service_name)
        self.managers = managers if managers is not None else [
            AvailabilityManager()
        ]

        self.add_url_rule(
            self.service_root,
            view_func=lambda: self.registry
        )

        for manager in self.managers:
            self.register_blueprint(manager.blueprint)


server = Server()

if __name__ == "__main__":
    load_dotenv()
    set_up_logging()

    logging.info("Starting PickupWatchService application")

    server.run(debug=True)
