from typing import FrozenSet, Optional

from ..config.properties import SwaggerProperties
from ..logging import BaseLogger
from ..paths import PathSelector, documented_paths
from ..security.scheme import OAuthScheme, SecurityContext
from .schema import ApiInfo, Contact, DocumentDescriptor

HTTPS_ONLY_PROTOCOLS: FrozenSet[str] = frozenset({"https"})
DEFAULT_PROTOCOLS: FrozenSet[str] = frozenset({"http", "https"})

# Response wrapper rendered as its body type.
GENERIC_MODEL_SUBSTITUTES = ["ResponseEntity"]
# Date/time types are documented as plain dates.
DIRECT_MODEL_SUBSTITUTES = {
    "LocalDate": "Date",
    "ZonedDateTime": "Date",
    "LocalDateTime": "Date",
}
IGNORED_PARAMETER_TYPES = ["Date"]


class DocumentAssembler:
    """Builds the documentation descriptor from the settings."""

    def __init__(self, logger: Optional[BaseLogger] = None):
        self.logger = logger

    def build_api_info(self, config: SwaggerProperties) -> ApiInfo:
        return ApiInfo(
            title=config.title,
            description=config.description,
            version=config.version,
            terms_of_service_url=config.terms_of_service_url,
            contact=Contact(
                name=config.contact_name,
                url=config.contact_url,
                email=config.contact_email,
            ),
            license=config.license,
            license_url=config.license_url,
            vendor_extensions=[],
        )

    def build_protocols(self, config: SwaggerProperties) -> FrozenSet[str]:
        if config.protocol is not None and config.protocol.https_only:
            return HTTPS_ONLY_PROTOCOLS
        return DEFAULT_PROTOCOLS

    def build_path_selector(self, include_pattern: Optional[str]) -> PathSelector:
        return documented_paths(include_pattern)

    def assemble(
        self,
        config: SwaggerProperties,
        security_context: Optional[SecurityContext] = None,
        security_scheme: Optional[OAuthScheme] = None,
    ) -> DocumentDescriptor:
        """
        Build the document descriptor.

        Args:
            config: The validated settings
            security_context: Context attached to the secured variant
            security_scheme: Scheme attached to the secured variant

        Returns:
            DocumentDescriptor: Secured when both security arguments are given

        Raises:
            ValueError: If only one of the security arguments is given
        """
        if (security_context is None) != (security_scheme is None):
            raise ValueError("A secured document needs both a security context and a security scheme")
        secured = security_context is not None and security_scheme is not None
        path_selector = self.build_path_selector(config.include_patterns)
        if self.logger:
            self.logger.log_debug(
                f"Documenting paths matching '{path_selector.include.pattern}' "
                f"(excluding '{path_selector.exclude.pattern}')"
            )

        return DocumentDescriptor(
            api_info=self.build_api_info(config),
            protocols=self.build_protocols(config),
            use_default_response_messages=False,
            for_code_generation=True,
            generic_model_substitutes=list(GENERIC_MODEL_SUBSTITUTES),
            direct_model_substitutes=dict(DIRECT_MODEL_SUBSTITUTES),
            ignored_parameter_types=list(IGNORED_PARAMETER_TYPES),
            path_selector=path_selector,
            security_contexts=[security_context] if secured else [],
            security_schemes=[security_scheme] if secured else [],
        )
