import pytest

from swaggerconf.modules.docket import DocketAutoConfiguration, DocketRegistration
from swaggerconf.modules.security import (
    ClientCredentialsGrant,
    GrantTypeResolutionError,
    SECURITY_SCHEME_NAME,
)
from tests.utils.test_logger import create_test_logger


class TestDocketAutoConfiguration:
    """Test cases for DocketAutoConfiguration."""

    @pytest.fixture
    def logger(self):
        return create_test_logger()

    def test_disabled_builds_nothing(self, make_properties, logger):
        """Test that the master switch off produces no descriptors at all."""
        registration = DocketAutoConfiguration(make_properties(enabled=False), logger).build()

        assert registration is None
        assert "INFO: API documentation is disabled" in logger.get_logs()

    def test_disabled_ignores_broken_security(self, make_properties, logger):
        config = make_properties(enabled=False, security={"flow": "bogus", "implicit-flow": None})

        assert DocketAutoConfiguration(config, logger).build() is None

    def test_unsecured_registration(self, make_properties, logger):
        """Test that security disabled yields only the document and UI settings."""
        registration = DocketAutoConfiguration(make_properties(security={"enabled": False}), logger).build()

        assert isinstance(registration, DocketRegistration)
        assert registration.security_scheme is None
        assert registration.security_context is None
        assert registration.security_configuration is None
        assert registration.document.security_contexts == []
        assert registration.document.security_schemes == []
        assert registration.ui_settings is not None
        assert [parameter.name for parameter in registration.pageable_parameters] == ["page", "size", "sort"]
        assert registration.secured is False
        assert "SECTION: Building unsecured API documentation" in logger.get_logs()

    def test_secured_registration(self, make_properties, logger):
        """Test that security enabled attaches one scheme and one context."""
        config = make_properties(security={
            "flow": "clientCredentials",
            "client-credentials-flow": {
                "token-endpoint-url": "https://auth/token",
                "client-id": "orders",
                "client-secret": "secret",
            },
        })

        registration = DocketAutoConfiguration(config, logger).build()

        assert registration.secured is True
        assert registration.security_scheme.name == SECURITY_SCHEME_NAME
        assert registration.security_scheme.grant_types == [ClientCredentialsGrant(token_url="https://auth/token")]
        assert registration.document.security_schemes == [registration.security_scheme]
        assert registration.document.security_contexts == [registration.security_context]
        assert registration.security_configuration.client_id == "orders"
        assert registration.security_configuration.client_secret == "secret"
        assert any("resolved to grant type 'client_credentials'" in log for log in logger.get_logs())

    def test_fatal_security_error_aborts(self, make_properties, logger):
        """Test that no partial registration is returned on a fatal error."""
        config = make_properties(security={"flow": "unknown", "implicit-flow": None})

        with pytest.raises(GrantTypeResolutionError):
            DocketAutoConfiguration(config, logger).build()

    def test_path_checks(self, make_properties, logger):
        registration = DocketAutoConfiguration(make_properties(), logger).build()

        assert registration.is_documented("/api/orders")
        assert registration.is_secured("/api/orders")
        assert not registration.is_documented("/internal")
        assert not registration.is_secured("/internal")

    def test_error_path_never_documented_even_when_secured(self, make_properties, logger):
        registration = DocketAutoConfiguration(make_properties(**{"include-patterns": ".*"}), logger).build()

        assert registration.security_context.applies("/error")
        assert not registration.is_documented("/error")
        assert not registration.is_secured("/error")

    def test_unsecured_paths_are_not_secured(self, make_properties, logger):
        registration = DocketAutoConfiguration(make_properties(security={"enabled": False}), logger).build()

        assert registration.is_documented("/api/orders")
        assert not registration.is_secured("/api/orders")

    def test_registration_is_frozen(self, make_properties, logger):
        registration = DocketAutoConfiguration(make_properties(), logger).build()

        with pytest.raises(ValueError):
            registration.security_scheme = None

    def test_registration_serialises(self, make_properties, logger):
        payload = DocketAutoConfiguration(make_properties(), logger).build().model_dump(mode="json")

        assert payload["security_scheme"]["grant_types"] == [
            {"type": "implicit", "login_endpoint": {"url": "https://auth.example.com/authorize"}}
        ]
        assert payload["security_context"]["path_selector"] == {"include": "/api/.*", "exclude": None}
        assert payload["security_configuration"]["client_secret"] == "UNDEFINED"
