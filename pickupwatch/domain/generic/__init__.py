from pickupwatch.domain.generic.default_map import DefaultMap
from pickupwatch.domain.generic.http_methods import HTTPMethods
