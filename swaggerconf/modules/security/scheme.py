"""Security scheme, context and credential descriptors."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from ..config.properties import Security, SecurityFlow
from ..logging import BaseLogger
from ..paths import PathSelector, regex
from .errors import MissingFlowConfigurationError
from .grant_types import GrantType, GrantTypeResolver

SECURITY_SCHEME_NAME = "oauth2Scheme"
UNDEFINED_CLIENT_SECRET = "UNDEFINED"
API_KEY_NAME = "swagger-api"
SCOPE_SEPARATOR = " "


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True)


class AuthorizationScope(_Descriptor):
    scope: str
    description: str = ""


class OAuthScheme(_Descriptor):
    name: str = SECURITY_SCHEME_NAME
    grant_types: List[GrantType]
    scopes: List[AuthorizationScope] = []


class SecurityReference(_Descriptor):
    reference: str = SECURITY_SCHEME_NAME
    scopes: List[AuthorizationScope] = []


class SecurityContext(_Descriptor):
    security_references: List[SecurityReference]
    path_selector: PathSelector

    def applies(self, path: str) -> bool:
        return self.path_selector.applies(path)


class SecurityConfiguration(_Descriptor):
    """Credentials pre-filled in the UI's authorize dialog."""

    client_id: Optional[str] = None
    client_secret: Optional[str] = UNDEFINED_CLIENT_SECRET
    realm: Optional[str] = None
    app_name: Optional[str] = None
    api_key: Optional[str] = None
    api_key_vehicle: Literal["header", "query"] = "header"
    api_key_name: str = API_KEY_NAME
    scope_separator: str = SCOPE_SEPARATOR


class SecuritySchemeAssembler:
    """Builds the OAuth2 scheme and everything bound to it."""

    def __init__(self, logger: Optional[BaseLogger] = None, resolver: Optional[GrantTypeResolver] = None):
        self.logger = logger
        self.resolver = resolver or GrantTypeResolver(logger)

    def build_scopes(self, security: Security) -> List[AuthorizationScope]:
        return [
            AuthorizationScope(scope=scope.name, description=scope.description)
            for scope in security.global_scopes
        ]

    def build_scheme(self, security: Security) -> OAuthScheme:
        return OAuthScheme(
            name=SECURITY_SCHEME_NAME,
            grant_types=self.resolver.grant_types(security),
            scopes=self.build_scopes(security),
        )

    def build_context(self, security: Security, include_pattern: Optional[str]) -> SecurityContext:
        """Bind the scheme to every path matching ``include_pattern``."""
        reference = SecurityReference(
            reference=SECURITY_SCHEME_NAME,
            scopes=self.build_scopes(security),
        )
        return SecurityContext(
            security_references=[reference],
            path_selector=regex(include_pattern),
        )

    def build_security_configuration(self, security: Security) -> SecurityConfiguration:
        client_id: Optional[str] = None
        client_secret: Optional[str] = UNDEFINED_CLIENT_SECRET

        match security.security_flow:
            case SecurityFlow.CLIENT_CREDENTIALS:
                settings = security.client_credentials_flow
                if settings is None:
                    raise MissingFlowConfigurationError(security.flow, "client-credentials-flow")
                client_id = settings.client_id
                client_secret = settings.client_secret
            case SecurityFlow.RESOURCE_OWNER_PASSWORD:
                settings = security.resource_owner_password_flow
                if settings is None:
                    raise MissingFlowConfigurationError(security.flow, "resource-owner-password-flow")
                client_id = settings.client_id
                client_secret = settings.client_secret
            case SecurityFlow.AUTHORIZATION_CODE:
                settings = security.authorization_code_flow
                if settings is None:
                    raise MissingFlowConfigurationError(security.flow, "authorization-code-flow")
                # These are the request parameter names, not credential values.
                client_id = settings.token_request_endpoint.client_id_name
                client_secret = settings.token_request_endpoint.client_secret_name
            case SecurityFlow.IMPLICIT:
                settings = security.implicit_flow
                if settings is None:
                    raise MissingFlowConfigurationError(security.flow, "implicit-flow")
                client_id = settings.client_id
            case _:
                if self.logger:
                    self.logger.log_warning(
                        f"Unknown security flow '{security.flow}', no client credentials configured"
                    )

        return SecurityConfiguration(
            client_id=client_id,
            client_secret=client_secret,
            realm=security.realm,
            app_name=security.api_name,
            api_key=security.api_key,
        )
