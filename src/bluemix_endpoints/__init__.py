# bluemix_endpoints/__init__.py

from .endpoints import (
    ERR_CODE_SERVICE_ENDPOINT,
    EndpointLocator,
    EndpointLocatorProtocol,
    Service,
    known_regions,
    new_endpoint_locator,
)
from .errors import ServiceEndpointError
from .schemas import ServiceEndpoint

__all__ = [
    "ERR_CODE_SERVICE_ENDPOINT",
    "EndpointLocator",
    "EndpointLocatorProtocol",
    "Service",
    "ServiceEndpoint",
    "ServiceEndpointError",
    "known_regions",
    "new_endpoint_locator",
]
