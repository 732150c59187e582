# endpoints/__init__.py

from .config import (
    ERR_CODE_SERVICE_ENDPOINT,
    REGION_TO_ENDPOINT,
    SERVICE_CONFIG,
    Service,
    ServiceSpec,
    known_regions,
)
from .locator import EndpointLocator, EndpointLocatorProtocol, new_endpoint_locator

__all__ = [
    # config
    "ERR_CODE_SERVICE_ENDPOINT",
    "REGION_TO_ENDPOINT",
    "SERVICE_CONFIG",
    "Service",
    "ServiceSpec",
    "known_regions",
    # locator
    "EndpointLocator",
    "EndpointLocatorProtocol",
    "new_endpoint_locator",
]
