"""healthlog CLI — entry point for the check, report, and log commands."""

import click

from healthlog import __version__

from .common import DEFAULT_CONFIG_PATH


@click.group()
@click.version_option(version=__version__, package_name="healthlog")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="YAML or JSON config file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool) -> None:
    """healthlog — personal health check-ins and dashboard."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


# Register subcommands (lazy imports keep startup fast)
from .check_cmd import check
from .log_cmd import log
from .report_cmd import report

main.add_command(check)
main.add_command(report)
main.add_command(log)
