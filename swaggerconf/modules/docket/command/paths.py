import sys
from typing import Sequence, TextIO

import click

from ..autoconfiguration import DocketAutoConfiguration
from .base import ConfigCommand


class PathsCommand(ConfigCommand):
    """Command class for checking which paths end up in the documentation."""

    def run(self, config_file: TextIO, paths: Sequence[str]):
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
            self.logger.log_warning("API documentation is disabled, no paths are documented")
            sys.exit(1)

        for path in paths:
            documented = registration.is_documented(path)
            secured = registration.is_secured(path)
            status = click.style("documented", fg="green") if documented else click.style("hidden", fg="red")
            suffix = " (secured)" if secured else ""
            click.echo(f"{path}: {status}{suffix}")
