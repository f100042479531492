"""Loading and validation of the documentation settings."""

from .properties import (
    SwaggerProperties,
    Security,
    SecurityFlow,
    GlobalScope,
    Protocol,
    ClientCredentialsFlow,
    ResourceOwnerPasswordFlow,
    AuthorizationCodeFlow,
    TokenEndpointProperties,
    TokenRequestEndpointProperties,
    ImplicitFlow,
)
from .template_renderer import TemplateRenderer
from .loader import SwaggerPropertiesLoader

__all__ = [
    "SwaggerProperties",
    "Security",
    "SecurityFlow",
    "GlobalScope",
    "Protocol",
    "ClientCredentialsFlow",
    "ResourceOwnerPasswordFlow",
    "AuthorizationCodeFlow",
    "TokenEndpointProperties",
    "TokenRequestEndpointProperties",
    "ImplicitFlow",
    "TemplateRenderer",
    "SwaggerPropertiesLoader",
]
