# bluemix_endpoints/errors.py

from .endpoints.config import ERR_CODE_SERVICE_ENDPOINT, SERVICE_CONFIG, Service


class ServiceEndpointError(LookupError):
    """
    Raised when no endpoint is configured for a service in a region.

    Every service reports a missing endpoint through this one error, so
    callers can branch on ``code`` regardless of which accessor failed.

    Attributes:
        code: Stable machine-checkable error code.
        service: The service whose endpoint was requested.
        region: The region string exactly as supplied to the locator.
    """

    def __init__(self, service: Service, region: str) -> None:
        self.code = ERR_CODE_SERVICE_ENDPOINT
        self.service = service
        self.region = region
        label = SERVICE_CONFIG[service].label
        super().__init__(f"{label} endpoint doesn't exist for region: \"{region}\"")
