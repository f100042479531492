from typing import TextIO
from ...config import SwaggerProperties, SwaggerPropertiesLoader, TemplateRenderer
from ...logging import BaseLogger


class ConfigCommand:
    """Shared configuration loading for docket commands."""

    def __init__(self, logger: BaseLogger):
        self.logger = logger
        self.renderer = TemplateRenderer(logger)

    def _read_config_content(self, config_file: TextIO) -> str:
        content = config_file.read()
        if not content.strip():
            raise ValueError("Configuration is empty")
        return content

    def _load_properties(self, config_file: TextIO) -> SwaggerProperties:
        content = self._read_config_content(config_file)
        return SwaggerPropertiesLoader.validate_and_load(content, self.renderer)
