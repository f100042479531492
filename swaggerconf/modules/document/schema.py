"""Descriptors handed to the documentation generator."""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, field_serializer

from ..paths import PathSelector
from ..security.scheme import OAuthScheme, SecurityContext


class DocumentationType(str, Enum):
    SWAGGER_2 = "swagger_2"


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True)


class Contact(_Descriptor):
    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None


class VendorExtension(_Descriptor):
    name: str
    value: str


class ApiInfo(_Descriptor):
    title: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    terms_of_service_url: Optional[str] = None
    contact: Contact = Contact()
    license: Optional[str] = None
    license_url: Optional[str] = None
    vendor_extensions: List[VendorExtension] = []


class DocumentDescriptor(_Descriptor):
    documentation_type: DocumentationType = DocumentationType.SWAGGER_2
    api_info: ApiInfo
    protocols: FrozenSet[str]
    use_default_response_messages: bool = False
    for_code_generation: bool = True
    generic_model_substitutes: List[str] = []
    direct_model_substitutes: Dict[str, str] = {}
    ignored_parameter_types: List[str] = []
    path_selector: PathSelector
    security_contexts: List[SecurityContext] = []
    security_schemes: List[OAuthScheme] = []

    @field_serializer("protocols")
    def serialize_protocols(self, protocols: FrozenSet[str]) -> List[str]:
        return sorted(protocols)

    @property
    def secured(self) -> bool:
        return bool(self.security_schemes)

    def documents(self, path: str) -> bool:
        return self.path_selector.applies(path)
