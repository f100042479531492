"""Switch-gated assembly of every descriptor the documentation needs."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..config.properties import SwaggerProperties
from ..document import DocumentAssembler, DocumentDescriptor, PageableParameter, pageable_parameters
from ..logging import BaseLogger
from ..security import (
    OAuthScheme,
    SecurityConfiguration,
    SecurityContext,
    SecuritySchemeAssembler,
)
from ..ui import UiSettings, UiSettingsBuilder


class DocketRegistration(BaseModel):
    """Everything registered with the documentation generator."""

    model_config = ConfigDict(frozen=True)

    document: DocumentDescriptor
    ui_settings: UiSettings
    pageable_parameters: List[PageableParameter]
    security_scheme: Optional[OAuthScheme] = None
    security_context: Optional[SecurityContext] = None
    security_configuration: Optional[SecurityConfiguration] = None

    @property
    def secured(self) -> bool:
        return self.security_scheme is not None

    def is_documented(self, path: str) -> bool:
        return self.document.documents(path)

    def is_secured(self, path: str) -> bool:
        return (
            self.security_context is not None
            and self.is_documented(path)
            and self.security_context.applies(path)
        )


class DocketAutoConfiguration:
    """Builds a DocketRegistration from validated settings.

    Nothing is built when ``enabled`` is off. ``security.enabled`` chooses
    between the unsecured and the secured document; exactly one of them is
    produced.
    """

    def __init__(self,
                 properties: SwaggerProperties,
                 logger: BaseLogger,
                 document_assembler: Optional[DocumentAssembler] = None,
                 scheme_assembler: Optional[SecuritySchemeAssembler] = None,
                 ui_builder: Optional[UiSettingsBuilder] = None):
        """
        Initialize the auto configuration with its dependencies.
        
        Args:
            properties: The validated settings
            logger: Logger instance
            document_assembler: Builds the document descriptor
            scheme_assembler: Builds the security descriptors
            ui_builder: Builds the UI settings
        """
        self.properties = properties
        self.logger = logger
        self.document_assembler = document_assembler or DocumentAssembler(logger)
        self.scheme_assembler = scheme_assembler or SecuritySchemeAssembler(logger)
        self.ui_builder = ui_builder or UiSettingsBuilder()

    def build(self) -> Optional[DocketRegistration]:
        """
        Assemble the registration.

        Returns:
            DocketRegistration or None when documentation is disabled

        Raises:
            SwaggerConfigurationError: If the security settings are unusable
        """
        if not self.properties.enabled:
            self.logger.log_info("API documentation is disabled")
            return None

        if self.properties.security_enabled:
            registration = self._secured_registration()
        else:
            registration = self._unsecured_registration()

        self.logger.log_descriptor("api_info", registration.document.api_info.model_dump(mode="json"))
        self.logger.log_descriptor("ui_settings", registration.ui_settings.model_dump(mode="json"))
        return registration

    def _unsecured_registration(self) -> DocketRegistration:
        self.logger.log_section("Building unsecured API documentation")
        return DocketRegistration(
            document=self.document_assembler.assemble(self.properties),
            ui_settings=self.ui_builder.build(self.properties),
            pageable_parameters=pageable_parameters(),
        )

    def _secured_registration(self) -> DocketRegistration:
        self.logger.log_section("Building secured API documentation")
        security = self.properties.security
        scheme = self.scheme_assembler.build_scheme(security)
        context = self.scheme_assembler.build_context(security, self.properties.include_patterns)
        configuration = self.scheme_assembler.build_security_configuration(security)
        self.logger.log_info(
            f"Security flow '{security.flow}' resolved to grant type '{scheme.grant_types[0].type}'"
        )

        return DocketRegistration(
            document=self.document_assembler.assemble(
                self.properties,
                security_context=context,
                security_scheme=scheme,
            ),
            ui_settings=self.ui_builder.build(self.properties),
            pageable_parameters=pageable_parameters(),
            security_scheme=scheme,
            security_context=context,
            security_configuration=configuration,
        )
