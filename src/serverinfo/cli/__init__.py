import click
import logging

from serverinfo.cli.info import info
from serverinfo.version import get_version

@click.group(invoke_without_command=True)
@click.version_option(version=get_version(), prog_name="serverinfo")
@click.pass_context
def main(ctx):
    """Server Info CLI. Runs the HTTP server when no command is given."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(server)

main.add_command(info)


@main.command()
def server():
    """Run the HTTP server on $PORT (default 8080)."""
    from serverinfo.api.server import BindError, serve
    from serverinfo.config.settings import LOG_LEVELS, Config

    settings = Config()
    if settings.log_level not in LOG_LEVELS:
        raise click.ClickException(
            f"Invalid SERVERINFO_LOG_LEVEL {settings.log_level!r}, "
            f"expected one of: {', '.join(LOG_LEVELS)}"
        )

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        serve(settings)
    except BindError as e:
        raise click.ClickException(str(e))
