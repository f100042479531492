from typing import List, TextIO, Tuple

import click

from .command.build import BuildCommand
from .command.paths import PathsCommand


def create_docket_commands() -> List[click.Command]:
    """Create the build, validate and paths commands."""

    @click.command(name='build')
    @click.argument('config_file', type=click.File('r'))
    @click.option('--format', '-f', 'output_format',
                  type=click.Choice(BuildCommand.SUPPORTED_FORMATS),
                  default='json',
                  help='Output format for the assembled descriptors')
    @click.pass_context
    def build(ctx, config_file: TextIO, output_format: str):
        """Assemble the documentation descriptors from a YAML file (use - for stdin)."""
        BuildCommand(ctx.obj.logger).run(config_file, output_format)

    @click.command(name='validate')
    @click.argument('config_file', type=click.File('r'))
    @click.pass_context
    def validate(ctx, config_file: TextIO):
        """Validate a YAML settings file without building anything."""
        BuildCommand(ctx.obj.logger).validate(config_file)

    @click.command(name='paths')
    @click.argument('config_file', type=click.File('r'))
    @click.argument('paths', nargs=-1, required=True)
    @click.pass_context
    def paths_command(ctx, config_file: TextIO, paths: Tuple[str, ...]):
        """Show whether each PATH is documented and secured.

        Examples:
            swaggerconf paths swagger.yaml /api/users /error
        """
        PathsCommand(ctx.obj.logger).run(config_file, paths)

    return [build, validate, paths_command]
