# endpoints/config.py

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple

ERR_CODE_SERVICE_ENDPOINT = "ServiceEndpointDoesnotExist"


class Service(Enum):
    """
    Enumeration of the backend APIs an EndpointLocator can resolve.

    Each member's value is the short tag used as the key into the built-in
    endpoint table.

    Attributes:
        ACCOUNT: Account management API.
        CF: Cloud Foundry (compute-foundation) API.
        MCCP: Multi-cloud control plane (management-plane) API.
        CONTAINER: Container service API.
        IAM: Identity and access management API.
        IAMPAP: IAM policy administration API.
        UAA: User account and authentication server.
    """

    ACCOUNT = "account"
    CF = "cf"
    MCCP = "mccp"
    CONTAINER = "cs"
    IAM = "iam"
    IAMPAP = "iampap"
    UAA = "uaa"


class ServiceSpec(NamedTuple):
    """
    Static description of a single service.

    Attributes:
        label: Human-readable name used in error messages.
        env_vars: Override variables, checked in order; the first one set to a
            non-empty value replaces the table URL.
    """

    label: str
    env_vars: tuple[str, ...]


SERVICE_CONFIG: MappingProxyType[Service, ServiceSpec] = MappingProxyType(
    {
        Service.ACCOUNT: ServiceSpec(
            "Account Management",
            ("IBMCLOUD_ACCOUNT_MANAGEMENT_API_ENDPOINT",),
        ),
        Service.CF: ServiceSpec("Cloud Foundry", ("IBMCLOUD_CF_API_ENDPOINT",)),
        Service.MCCP: ServiceSpec("MCCP API", ("IBMCLOUD_MCCP_API_ENDPOINT",)),
        Service.CONTAINER: ServiceSpec(
            "Container Service",
            ("IBMCLOUD_CS_API_ENDPOINT",),
        ),
        Service.IAM: ServiceSpec("IAM", ("IBMCLOUD_IAM_API_ENDPOINT",)),
        Service.IAMPAP: ServiceSpec("IAMPAP", ("IBMCLOUD_IAMPAP_API_ENDPOINT",)),
        Service.UAA: ServiceSpec("UAA", ("IBMCLOUD_UAA_ENDPOINT",)),
    },
)

# Coverage is partial; callers can fill gaps through the override variables.
# iampap has no eu-de entry, and its us-east entry points at the IAM host.
_ENDPOINTS: dict[Service, dict[str, str]] = {
    Service.CF: {
        "us-south": "https://api.ng.bluemix.net",
        "us-east": "https://api.us-east.bluemix.net",
        "eu-gb": "https://api.eu-gb.bluemix.net",
        "au-syd": "https://api.au-syd.bluemix.net",
        "eu-de": "https://api.eu-de.bluemix.net",
    },
    Service.MCCP: {
        "us-south": "https://mccp.ng.bluemix.net",
        "us-east": "https://mccp.us-east.bluemix.net",
        "eu-gb": "https://mccp.eu-gb.bluemix.net",
        "au-syd": "https://mccp.au-syd.bluemix.net",
        "eu-de": "https://mccp.eu-de.bluemix.net",
    },
    Service.IAM: {
        "us-south": "https://iam.ng.bluemix.net",
        "us-east": "https://iam.us-east.bluemix.net",
        "eu-gb": "https://iam.eu-gb.bluemix.net",
        "au-syd": "https://iam.au-syd.bluemix.net",
        "eu-de": "https://iam.eu-de.bluemix.net",
    },
    Service.IAMPAP: {
        "us-south": "https://iampap.ng.bluemix.net",
        "us-east": "https://iam.us-east.bluemix.net",
        "eu-gb": "https://iampap.eu-gb.bluemix.net",
        "au-syd": "https://iampap.au-syd.bluemix.net",
    },
    Service.UAA: {
        "us-south": "https://login.ng.bluemix.net/UAALoginServerWAR",
        "us-east": "https://login.us-east.bluemix.net/UAALoginServerWAR",
        "eu-gb": "https://login.eu-gb.bluemix.net/UAALoginServerWAR",
        "au-syd": "https://login.au-syd.bluemix.net/UAALoginServerWAR",
        "eu-de": "https://login.eu-de.bluemix.net/UAALoginServerWAR",
    },
    Service.ACCOUNT: {
        "us-south": "https://accountmanagement.ng.bluemix.net",
        "us-east": "https://accountmanagement.us-east.bluemix.net",
        "eu-gb": "https://accountmanagement.eu-gb.bluemix.net",
        "au-syd": "https://accountmanagement.au-syd.bluemix.net",
        "eu-de": "https://accountmanagement.eu-de.bluemix.net",
    },
    Service.CONTAINER: {
        "us-south": "https://us-south.containers.bluemix.net",
        "us-east": "https://us-east.containers.bluemix.net",
        "eu-de": "https://eu-central.containers.bluemix.net",
        "au-syd": "https://ap-south.containers.bluemix.net",
        "eu-gb": "https://uk-south.containers.bluemix.net",
    },
}

REGION_TO_ENDPOINT: MappingProxyType[Service, MappingProxyType[str, str]] = (
    MappingProxyType(
        {
            service: MappingProxyType(regions)
            for service, regions in _ENDPOINTS.items()
        },
    )
)


def known_regions(service: Service) -> tuple[str, ...]:
    """
    List the regions the built-in table covers for a service.

    Args:
        service (Service): The service to inspect.

    Returns:
        tuple[str, ...]: Region identifiers in sorted order.
    """
    return tuple(sorted(REGION_TO_ENDPOINT[service]))
