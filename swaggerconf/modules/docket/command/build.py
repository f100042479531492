import json
import sys
from typing import TextIO

import click
import yaml

from ..autoconfiguration import DocketAutoConfiguration
from .base import ConfigCommand


class BuildCommand(ConfigCommand):
    """Command class for assembling and printing the docket registration."""

    SUPPORTED_FORMATS = ['json', 'yaml']

    def run(self, config_file: TextIO, output_format: str = 'json'):
        """
        Build the registration and print it to stdout.

        Args:
            config_file: File containing the swagger YAML settings
            output_format: json or yaml
        """
        try:
            properties = self._load_properties(config_file)
            registration = DocketAutoConfiguration(properties, self.logger).build()
        except ValueError as err:
            self.logger.log_error(f"Configuration error: {str(err)}")
            sys.exit(1)
        except Exception as err:
            self.logger.log_error(f"Unexpected error while building documentation: {str(err)}")
            raise

        if registration is None:
            self.logger.log_warning("Nothing to build: set 'swagger.enabled: true' to enable documentation")
            return

        payload = registration.model_dump(mode="json")
        if output_format == 'yaml':
            click.echo(yaml.safe_dump(payload, sort_keys=False), nl=False)
        else:
            click.echo(json.dumps(payload, indent=2))

    def validate(self, config_file: TextIO):
        """Load the settings and report what would be built."""
        try:
            properties = self._load_properties(config_file)
        except ValueError as err:
            self.logger.log_error(f"Configuration error: {str(err)}")
            sys.exit(1)

        security = properties.security
        if security.security_flow is None:
            self.logger.log_warning(f"Unknown security flow '{security.flow}', implicit will be used")
        click.echo(
            f"Configuration is valid (enabled={properties.enabled}, "
            f"security={security.enabled}, flow={security.flow})"
        )
