import click
from swaggerconf.modules.docket.commands import create_docket_commands
from swaggerconf.modules.logging import create_logger


class SwaggerconfContext:
    """Context object to store CLI state."""
    def __init__(self):
        self.logger = None

pass_context = click.make_pass_decorator(SwaggerconfContext, ensure=True)

@click.group()
@click.option('--output', '-o',
              type=click.Choice(['colorful', 'plain', 'json']),
              default='colorful',
              help='Log format (colorful for CLI, plain for CI/file, json for machine parsing)',
              envvar='SWAGGERCONF_OUTPUT')
@click.option('--log-level', '-l',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
              default='INFO',
              help='Set the logging level',
              envvar='SWAGGERCONF_LOG_LEVEL')
@pass_context
def cli(ctx, output, log_level):
    """swaggerconf: assemble API documentation descriptors from settings."""
    ctx.logger = create_logger(output, log_level)

# Add commands
for command in create_docket_commands():
    cli.add_command(command)

def main():
    cli()

if __name__ == '__main__':
    main()
