import pytest
from unittest.mock import Mock

from swaggerconf.modules.config import SwaggerProperties
from swaggerconf.modules.logging import BaseLogger


@pytest.fixture
def mock_logger():
    return Mock(spec=BaseLogger)


@pytest.fixture
def security_data():
    """Security block with every flow configured."""
    return {
        "enabled": True,
        "flow": "implicit",
        "realm": "test-realm",
        "api-name": "test-api",
        "api-key": "test-api-key",
        "global-scopes": [
            {"name": "read", "description": "Read access"},
            {"name": "write", "description": "Write access"},
        ],
        "client-credentials-flow": {
            "token-endpoint-url": "https://auth.example.com/cc/token",
            "client-id": "cc-client",
            "client-secret": "cc-secret",
        },
        "resource-owner-password-flow": {
            "token-endpoint-url": "https://auth.example.com/password/token",
            "client-id": "ro-client",
            "client-secret": "ro-secret",
        },
        "authorization-code-flow": {
            "token-endpoint": {
                "url": "https://auth.example.com/code/token",
                "token-name": "access_token",
            },
            "token-request-endpoint": {
                "url": "https://auth.example.com/code/authorize",
                "client-id-name": "client_id",
                "client-secret-name": "client_secret",
            },
        },
        "implicit-flow": {
            "authorization-endpoint-url": "https://auth.example.com/authorize",
            "client-id": "implicit-client",
        },
    }


@pytest.fixture
def properties_data(security_data):
    return {
        "enabled": True,
        "title": "Orders API",
        "description": "Order management",
        "version": "1.2.0",
        "terms-of-service-url": "https://example.com/tos",
        "contact-name": "API Team",
        "contact-url": "https://example.com",
        "contact-email": "api@example.com",
        "license": "Apache 2.0",
        "license-url": "https://www.apache.org/licenses/LICENSE-2.0",
        "include-patterns": "/api/.*",
        "security": security_data,
    }


@pytest.fixture
def make_properties(properties_data):
    """Build SwaggerProperties from the default data with overrides."""
    def _make(security=None, **overrides) -> SwaggerProperties:
        data = {**properties_data, **overrides}
        if security is not None:
            data["security"] = {**properties_data["security"], **security}
        return SwaggerProperties.model_validate(data)
    return _make
