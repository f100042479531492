from .errors import (
    SwaggerConfigurationError,
    GrantTypeResolutionError,
    MissingFlowConfigurationError,
)
from .grant_types import (
    GrantType,
    GrantTypeResolver,
    ClientCredentialsGrant,
    ResourceOwnerPasswordCredentialsGrant,
    AuthorizationCodeGrant,
    ImplicitGrant,
    LoginEndpoint,
    TokenEndpoint,
    TokenRequestEndpoint,
)
from .scheme import (
    SECURITY_SCHEME_NAME,
    UNDEFINED_CLIENT_SECRET,
    AuthorizationScope,
    OAuthScheme,
    SecurityReference,
    SecurityContext,
    SecurityConfiguration,
    SecuritySchemeAssembler,
)

__all__ = [
    'SwaggerConfigurationError',
    'GrantTypeResolutionError',
    'MissingFlowConfigurationError',
    'GrantType',
    'GrantTypeResolver',
    'ClientCredentialsGrant',
    'ResourceOwnerPasswordCredentialsGrant',
    'AuthorizationCodeGrant',
    'ImplicitGrant',
    'LoginEndpoint',
    'TokenEndpoint',
    'TokenRequestEndpoint',
    'SECURITY_SCHEME_NAME',
    'UNDEFINED_CLIENT_SECRET',
    'AuthorizationScope',
    'OAuthScheme',
    'SecurityReference',
    'SecurityContext',
    'SecurityConfiguration',
    'SecuritySchemeAssembler',
]
