# endpoints/locator.py

import logging
from typing import Protocol

from bluemix_endpoints.errors import ServiceEndpointError
from bluemix_endpoints.schemas import ServiceEndpoint

from ._utils import env_fallback
from .config import REGION_TO_ENDPOINT, SERVICE_CONFIG, Service

logger = logging.getLogger(__name__)


class EndpointLocatorProtocol(Protocol):
    """
    Structural interface for anything that resolves service endpoints.

    Each accessor returns the base URL of its service, or raises
    ServiceEndpointError when the region has no endpoint for it.
    """

    def account_management_endpoint(self) -> str: ...

    def cf_api_endpoint(self) -> str: ...

    def mccp_api_endpoint(self) -> str: ...

    def container_endpoint(self) -> str: ...

    def iam_endpoint(self) -> str: ...

    def iampap_endpoint(self) -> str: ...

    def uaa_endpoint(self) -> str: ...


def new_endpoint_locator(region: str) -> "EndpointLocator":
    """
    Create an EndpointLocator bound to a region.

    Args:
        region (str): Region identifier, e.g. "us-south". Stored verbatim.

    Returns:
        EndpointLocator: Locator resolving endpoints for the region.
    """
    return EndpointLocator(region)


class EndpointLocator:
    """
    Resolve base URLs of backend services for a single region.

    The region is fixed at construction and used for every lookup. URLs come
    from the built-in endpoint table, unless one of the service's override
    environment variables is set to a non-empty value. Regions missing from
    a service's table entry raise ServiceEndpointError, even when an override
    is set.
    """

    __slots__ = ("_region",)

    def __init__(self, region: str) -> None:
        """
        Initialise with the region to resolve against.

        Args:
            region (str): Region identifier. Not normalised or validated.
        """
        self._region = region

    def __repr__(self) -> str:
        return f"EndpointLocator(region={self._region!r})"

    @property
    def region(self) -> str:
        """The region this locator was constructed with."""
        return self._region

    def endpoint(self, service: Service) -> str:
        """
        Resolve the base URL of a service for this locator's region.

        Args:
            service (Service): The service to resolve.

        Returns:
            str: The override value if one is set, otherwise the table URL.

        Raises:
            ServiceEndpointError: If the region has no endpoint for the service.
        """
        url, _ = self._resolve(service)
        return url

    def lookup(self, service: Service) -> tuple[str, ServiceEndpointError | None]:
        """
        Resolve a service endpoint without raising.

        Returns:
            tuple[str, ServiceEndpointError | None]: ``(url, None)`` on
                success, or ``("", error)`` if the region has no endpoint.
        """
        try:
            return self.endpoint(service), None
        except ServiceEndpointError as error:
            return "", error

    def resolve(self) -> tuple[ServiceEndpoint, ...]:
        """
        Resolve every known service for this locator's region.

        Services with no endpoint in the region are left out of the result.

        Returns:
            tuple[ServiceEndpoint, ...]: One record per resolvable service, in
                Service declaration order.
        """
        resolved = []

        for service in Service:
            try:
                url, source = self._resolve(service)
            except ServiceEndpointError as error:
                logger.debug("Skipping %s: %s", service.value, error)
                continue

            resolved.append(
                ServiceEndpoint(
                    service=service.value,
                    region=self._region,
                    url=url,
                    source=source,
                ),
            )

        return tuple(resolved)

    def account_management_endpoint(self) -> str:
        """Base URL of the account management API."""
        return self.endpoint(Service.ACCOUNT)

    def cf_api_endpoint(self) -> str:
        """Base URL of the Cloud Foundry API."""
        return self.endpoint(Service.CF)

    def mccp_api_endpoint(self) -> str:
        """Base URL of the MCCP API."""
        return self.endpoint(Service.MCCP)

    def container_endpoint(self) -> str:
        """Base URL of the container service API."""
        return self.endpoint(Service.CONTAINER)

    def iam_endpoint(self) -> str:
        """Base URL of the IAM API."""
        return self.endpoint(Service.IAM)

    def iampap_endpoint(self) -> str:
        """Base URL of the IAM policy administration API."""
        return self.endpoint(Service.IAMPAP)

    def uaa_endpoint(self) -> str:
        """Base URL of the UAA login server."""
        return self.endpoint(Service.UAA)

    def _resolve(self, service: Service) -> tuple[str, str]:
        """
        Look up a service endpoint and apply any environment override.

        Returns:
            tuple[str, str]: The URL and its source, "table" or "environment".

        Raises:
            ServiceEndpointError: If the region has no endpoint for the service.
        """
        table_url = REGION_TO_ENDPOINT[service].get(self._region)
        if table_url is None:
            raise ServiceEndpointError(service, self._region)

        url = env_fallback(SERVICE_CONFIG[service].env_vars, table_url)
        if url == table_url:
            return url, "table"

        logger.debug(
            "Using %s endpoint override for region %s: %s",
            service.value,
            self._region,
            url,
        )
        return url, "environment"
