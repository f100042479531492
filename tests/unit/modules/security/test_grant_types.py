import pytest

from swaggerconf.modules.security import (
    AuthorizationCodeGrant,
    ClientCredentialsGrant,
    GrantTypeResolutionError,
    GrantTypeResolver,
    ImplicitGrant,
    MissingFlowConfigurationError,
    ResourceOwnerPasswordCredentialsGrant,
)


class TestGrantTypeResolver:
    """Test cases for GrantTypeResolver."""

    @pytest.fixture
    def resolver(self, mock_logger):
        return GrantTypeResolver(mock_logger)

    def test_client_credentials(self, resolver, make_properties):
        """Test the client credentials flow carries only its token URL."""
        security = make_properties(security={
            "flow": "clientCredentials",
            "client-credentials-flow": {"token-endpoint-url": "https://auth/token"},
        }).security

        grant_type = resolver.resolve(security)

        assert isinstance(grant_type, ClientCredentialsGrant)
        assert grant_type.token_url == "https://auth/token"
        assert grant_type.model_dump() == {"type": "client_credentials", "token_url": "https://auth/token"}

    def test_resource_owner_password(self, resolver, make_properties):
        """Test the password flow reads its own sub-record."""
        security = make_properties(security={"flow": "resourceOwnerPassword"}).security

        grant_type = resolver.resolve(security)

        assert isinstance(grant_type, ResourceOwnerPasswordCredentialsGrant)
        assert grant_type.token_url == "https://auth.example.com/password/token"

    def test_authorization_code(self, resolver, make_properties):
        """Test the authorization code flow carries both endpoints."""
        security = make_properties(security={"flow": "authorizationCode"}).security

        grant_type = resolver.resolve(security)

        assert isinstance(grant_type, AuthorizationCodeGrant)
        assert grant_type.token_endpoint.url == "https://auth.example.com/code/token"
        assert grant_type.token_endpoint.token_name == "access_token"
        assert grant_type.token_request_endpoint.url == "https://auth.example.com/code/authorize"
        assert grant_type.token_request_endpoint.client_id_name == "client_id"
        assert grant_type.token_request_endpoint.client_secret_name == "client_secret"

    def test_implicit(self, resolver, make_properties, mock_logger):
        """Test the implicit flow carries the login endpoint."""
        security = make_properties(security={"flow": "implicit"}).security

        grant_type = resolver.resolve(security)

        assert isinstance(grant_type, ImplicitGrant)
        assert grant_type.login_endpoint.url == "https://auth.example.com/authorize"
        mock_logger.log_debug.assert_not_called()

    @pytest.mark.parametrize("flow", ["", "   ", "unknown", "Implicit", "CLIENTCREDENTIALS"])
    def test_unrecognised_flow_falls_back_to_implicit(self, resolver, make_properties, mock_logger, flow):
        """Test that unknown flow names silently use the implicit flow."""
        security = make_properties(security={"flow": flow}).security

        first = resolver.resolve(security)
        second = resolver.resolve(security)

        assert isinstance(first, ImplicitGrant)
        assert first == second
        assert first.login_endpoint.url == "https://auth.example.com/authorize"
        mock_logger.log_debug.assert_called()

    def test_grant_types_has_exactly_one_element(self, resolver, make_properties):
        security = make_properties(security={"flow": "authorizationCode"}).security

        grant_types = resolver.grant_types(security)

        assert len(grant_types) == 1
        assert isinstance(grant_types[0], AuthorizationCodeGrant)

    def test_missing_implicit_settings_on_fallback_is_fatal(self, resolver, make_properties):
        """Test that the fallback without implicit settings aborts."""
        security = make_properties(security={"flow": "unknown", "implicit-flow": None}).security

        with pytest.raises(GrantTypeResolutionError, match="No grantType was found for the desired flow"):
            resolver.resolve(security)

    def test_missing_implicit_settings_is_fatal(self, resolver, make_properties):
        security = make_properties(security={"flow": "implicit", "implicit-flow": None}).security

        with pytest.raises(GrantTypeResolutionError):
            resolver.resolve(security)

    @pytest.mark.parametrize("flow, key", [
        ("clientCredentials", "client-credentials-flow"),
        ("resourceOwnerPassword", "resource-owner-password-flow"),
        ("authorizationCode", "authorization-code-flow"),
    ])
    def test_missing_selected_flow_settings(self, resolver, make_properties, flow, key):
        """Test that a selected flow without its settings is a configuration error."""
        security = make_properties(security={"flow": flow, key: None}).security

        with pytest.raises(MissingFlowConfigurationError, match=key):
            resolver.resolve(security)

    def test_resolution_errors_are_value_errors(self, resolver, make_properties):
        security = make_properties(security={"flow": "implicit", "implicit-flow": None}).security

        with pytest.raises(ValueError):
            resolver.resolve(security)

    def test_resolver_works_without_logger(self, make_properties):
        security = make_properties(security={"flow": "bogus"}).security

        assert isinstance(GrantTypeResolver().resolve(security), ImplicitGrant)
