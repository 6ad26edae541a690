from __future__ import annotations

import typer

from .commands import account_cmd, config_cmd, contacts_cmd, lists_cmd, messages_cmd, templates_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="textmagic",
        help="TextMagic REST API command line client.",
        no_args_is_help=True,
    )

    app.add_typer(config_cmd.app, name="config")
    app.command("whoami")(account_cmd.whoami)
    app.add_typer(messages_cmd.app, name="messages")
    app.add_typer(contacts_cmd.app, name="contacts")
    app.add_typer(lists_cmd.app, name="lists")
    app.add_typer(templates_cmd.app, name="templates")

    @app.callback()
    def _main(verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs.")):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
