"""Configuration records bound from the ``swagger:`` block."""

import re
from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _to_kebab(name: str) -> str:
    return name.replace("_", "-")


class _Properties(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_kebab,
        populate_by_name=True,
        frozen=True,
    )


class SecurityFlow(str, Enum):
    CLIENT_CREDENTIALS = "clientCredentials"
    RESOURCE_OWNER_PASSWORD = "resourceOwnerPassword"
    AUTHORIZATION_CODE = "authorizationCode"
    IMPLICIT = "implicit"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["SecurityFlow"]:
        """Case-sensitive lookup; unknown or empty names give None."""
        for flow in cls:
            if flow.value == name:
                return flow
        return None


class GlobalScope(_Properties):
    name: str
    description: str = ""


class ClientCredentialsFlow(_Properties):
    token_endpoint_url: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None


class ResourceOwnerPasswordFlow(_Properties):
    token_endpoint_url: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None


class TokenEndpointProperties(_Properties):
    url: Optional[str] = None
    token_name: Optional[str] = None


class TokenRequestEndpointProperties(_Properties):
    url: Optional[str] = None
    client_id_name: Optional[str] = None
    client_secret_name: Optional[str] = None


class AuthorizationCodeFlow(_Properties):
    token_endpoint: TokenEndpointProperties = TokenEndpointProperties()
    token_request_endpoint: TokenRequestEndpointProperties = TokenRequestEndpointProperties()


class ImplicitFlow(_Properties):
    authorization_endpoint_url: Optional[str] = None
    client_id: Optional[str] = None


class Security(_Properties):
    enabled: bool = False
    flow: str = SecurityFlow.IMPLICIT.value
    realm: Optional[str] = None
    api_name: Optional[str] = None
    api_key: Optional[str] = None
    global_scopes: List[GlobalScope] = []
    client_credentials_flow: Optional[ClientCredentialsFlow] = None
    resource_owner_password_flow: Optional[ResourceOwnerPasswordFlow] = None
    authorization_code_flow: Optional[AuthorizationCodeFlow] = None
    implicit_flow: Optional[ImplicitFlow] = None

    @field_validator("flow", mode="before")
    @classmethod
    def validate_flow(cls, value):
        """A key left without a value binds as an empty flow name."""
        return "" if value is None else value

    @property
    def security_flow(self) -> Optional[SecurityFlow]:
        return SecurityFlow.from_name(self.flow)


class Protocol(_Properties):
    # http-only is the key older configurations used for the same switch
    https_only: bool = Field(
        default=False,
        validation_alias=AliasChoices("https-only", "https_only", "http-only"),
    )


class SwaggerProperties(_Properties):
    """Immutable snapshot of the documentation settings."""

    enabled: bool = False
    title: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    terms_of_service_url: Optional[str] = None
    contact_name: Optional[str] = None
    contact_url: Optional[str] = None
    contact_email: Optional[str] = None
    license: Optional[str] = None
    license_url: Optional[str] = None
    include_patterns: Optional[str] = None
    protocol: Optional[Protocol] = None
    enable_try_out_methods: bool = True
    security: Security = Security()

    @field_validator("include_patterns")
    @classmethod
    def validate_include_patterns(cls, value: Optional[str]) -> Optional[str]:
        """Blank patterns are allowed (they select the default); others must compile."""
        if value is None or not value.strip():
            return value
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"include-patterns is not a valid regular expression: {e}")
        return value

    @property
    def security_enabled(self) -> bool:
        return self.security.enabled
