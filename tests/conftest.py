"""
Shared fixtures for the Stormpath client tests.
"""
import pytest

from stormpath_client.api_client import ClientConfig
from stormpath_client.client.filters import CriteriaFilter
from stormpath_client.resources.models import new_account_store_mapping


APP_HREF = "https://api.stormpath.com/v1/applications/app123"
DIRECTORY_HREF = "https://api.stormpath.com/v1/directories/dir456"


@pytest.fixture
def accounts_url():
    """Collection URL used across request tests."""
    return f"{APP_HREF}/accounts"


@pytest.fixture
def account_store_mapping():
    """Mapping between the test application and directory."""
    return new_account_store_mapping(APP_HREF, DIRECTORY_HREF)


@pytest.fixture
def email_filter():
    """Criteria filter on a single email address."""
    return CriteriaFilter(email="jean@example.com")


@pytest.fixture
def client_config():
    """Client configuration pointing at a fake base URL."""
    return ClientConfig(base_url="https://api.example.com/v1", timeout=5.0)
