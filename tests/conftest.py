# tests/conftest.py

import pytest

from bluemix_endpoints.endpoints.config import SERVICE_CONFIG


@pytest.fixture(autouse=True)
def _clear_endpoint_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Remove every endpoint override variable for the duration of a test.
    """
    for spec in SERVICE_CONFIG.values():
        for name in spec.env_vars:
            monkeypatch.delenv(name, raising=False)
