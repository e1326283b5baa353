from pickupwatch.facade.apple.fulfillment_facade import FulfillmentFacade
