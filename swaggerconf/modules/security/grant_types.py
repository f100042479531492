"""OAuth2 grant types advertised by the documentation's security scheme."""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..config.properties import Security, SecurityFlow
from ..logging import BaseLogger
from .errors import GrantTypeResolutionError, MissingFlowConfigurationError


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True)


class LoginEndpoint(_Descriptor):
    url: Optional[str] = None


class TokenEndpoint(_Descriptor):
    url: Optional[str] = None
    token_name: Optional[str] = None


class TokenRequestEndpoint(_Descriptor):
    url: Optional[str] = None
    client_id_name: Optional[str] = None
    client_secret_name: Optional[str] = None


class ClientCredentialsGrant(_Descriptor):
    type: Literal["client_credentials"] = "client_credentials"
    token_url: Optional[str] = None


class ResourceOwnerPasswordCredentialsGrant(_Descriptor):
    type: Literal["password"] = "password"
    token_url: Optional[str] = None


class AuthorizationCodeGrant(_Descriptor):
    type: Literal["authorization_code"] = "authorization_code"
    token_endpoint: TokenEndpoint
    token_request_endpoint: TokenRequestEndpoint


class ImplicitGrant(_Descriptor):
    type: Literal["implicit"] = "implicit"
    login_endpoint: LoginEndpoint


GrantType = Annotated[
    Union[
        ClientCredentialsGrant,
        ResourceOwnerPasswordCredentialsGrant,
        AuthorizationCodeGrant,
        ImplicitGrant,
    ],
    Field(discriminator="type"),
]


class GrantTypeResolver:
    """Picks the grant type matching the configured security flow."""

    def __init__(self, logger: Optional[BaseLogger] = None):
        self.logger = logger

    def resolve(self, security: Security) -> GrantType:
        """
        Build the grant type for ``security.flow``.

        Unknown or empty flow names fall back to the implicit flow.

        Raises:
            MissingFlowConfigurationError: If the selected flow has no settings
            GrantTypeResolutionError: If no grant type could be built
        """
        flow = security.security_flow
        grant_type: Optional[GrantType] = None

        match flow:
            case SecurityFlow.CLIENT_CREDENTIALS:
                settings = security.client_credentials_flow
                if settings is None:
                    raise MissingFlowConfigurationError(flow.value, "client-credentials-flow")
                grant_type = ClientCredentialsGrant(token_url=settings.token_endpoint_url)
            case SecurityFlow.RESOURCE_OWNER_PASSWORD:
                settings = security.resource_owner_password_flow
                if settings is None:
                    raise MissingFlowConfigurationError(flow.value, "resource-owner-password-flow")
                grant_type = ResourceOwnerPasswordCredentialsGrant(token_url=settings.token_endpoint_url)
            case SecurityFlow.AUTHORIZATION_CODE:
                settings = security.authorization_code_flow
                if settings is None:
                    raise MissingFlowConfigurationError(flow.value, "authorization-code-flow")
                grant_type = AuthorizationCodeGrant(
                    token_endpoint=TokenEndpoint(
                        url=settings.token_endpoint.url,
                        token_name=settings.token_endpoint.token_name,
                    ),
                    token_request_endpoint=TokenRequestEndpoint(
                        url=settings.token_request_endpoint.url,
                        client_id_name=settings.token_request_endpoint.client_id_name,
                        client_secret_name=settings.token_request_endpoint.client_secret_name,
                    ),
                )
            case _:
                if flow is not SecurityFlow.IMPLICIT and self.logger:
                    self.logger.log_debug(f"Unknown security flow '{security.flow}', using implicit")
                if security.implicit_flow is not None:
                    grant_type = ImplicitGrant(
                        login_endpoint=LoginEndpoint(url=security.implicit_flow.authorization_endpoint_url)
                    )

        if grant_type is None:
            raise GrantTypeResolutionError(security.flow)
        return grant_type

    def grant_types(self, security: Security) -> List[GrantType]:
        return [self.resolve(security)]
