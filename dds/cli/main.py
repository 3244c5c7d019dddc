"""Main CLI application using Cyclopts."""

import sys

import cyclopts
import logfire

from dds.cli.commands import config, demo, isbn
from dds.cli.console import get_console
from dds.config import Config, configure_logging
from dds.domain.shared.error import ConfigurationError

app = cyclopts.App(
    name="dds",
    help="Domain-Driven Security - secure-by-design domain primitives",
)

app.command(demo.app, name="demo")
app.command(isbn.app, name="isbn")
app.command(config.app, name="config")


def main() -> None:
    try:
        configure_logging(Config().logging)
    except ConfigurationError as e:
        get_console().error(e.message, hint="Check DDS_LOGGING__LEVEL or the logging section of your config file")
        sys.exit(1)
    logfire.configure(send_to_logfire="if-token-present", console=False)
    app()
