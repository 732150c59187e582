# schemas/endpoints.py

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ServiceEndpoint(BaseModel):
    """
    A resolved base URL for one service in one region.

    ``source`` records whether the URL came from the built-in table or from
    an override environment variable.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    service: str
    region: str
    url: str
    source: Literal["table", "environment"]
