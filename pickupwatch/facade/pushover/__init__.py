from pickupwatch.facade.pushover.pushover_facade import PushoverFacade
