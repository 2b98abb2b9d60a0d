#!/usr/bin/env python3
"""
Main CLI Entry Point for the CLI ATM Machine

Starts an ATM session either interactively (no subcommand: prompt for the
default account pin) or with a flag-style transaction such as

    atm deposit --amount=2000 --username=philemon --pin=1234

Every transaction subcommand runs once and then hands over to the
read-eval-prompt loop, unless --no-repl is given.
"""

import logging
import os
import sys
from typing import Any

import click

from ..core.config import Config, get_config, reload_config
from ..core.errors import UnknownCommandError
from ..machine.commands import CommandKind, CommandRegistry
from ..machine.dispatcher import Dispatcher
from ..machine.state import AppState

logger = logging.getLogger(__name__)


class RegistryGroup(click.Group):
    """Click group that also resolves subcommands by registry alias."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command

        # Aliases only; numeric indexes belong to the interactive prompt
        if cmd_name.isascii() and cmd_name.isdigit():
            return None
        try:
            resolved = CommandRegistry().find(cmd_name)
        except UnknownCommandError:
            return None
        return super().get_command(ctx, resolved.name)


def _load_config(reload: bool = False) -> Config:
    try:
        return reload_config() if reload else get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e


def _config_from(ctx: click.Context) -> Config:
    obj = ctx.find_object(dict)
    if obj and "config" in obj:
        return obj["config"]
    return _load_config()


def _run_transaction(ctx: click.Context, kind: CommandKind, no_repl: bool, **args: Any) -> None:
    """Run one transaction against a fresh session, then continue interactively."""
    state = AppState.from_config(_config_from(ctx))
    dispatcher = Dispatcher(state)
    command = state.registry.get(kind)

    logger.debug(f"Startup command: {command.name}")
    if dispatcher.dispatch(command, args) or no_repl:
        return
    dispatcher.run()


no_repl_option = click.option(
    "--no-repl", is_flag=True, help="Run the single transaction and exit instead of prompting for more."
)
username_option = click.option("--username", required=True, help="The username of the account.")
pin_option = click.option("--pin", required=True, help="The transaction pin of the account.")
amount_option = click.option("--amount", required=True, help="Amount to deposit or withdraw.")


@click.group(cls=RegistryGroup, invoke_without_command=True)
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    CLI ATM Machine - basic bank/ATM transactions from the terminal.

    Run without a command to log in to the default account interactively.
    Note all amounts are in NGN.
    """
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["ATM_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    config = _load_config(reload=bool(config_env or debug))

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("atm").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Default account: {config.accounts.default_username}")

    if debug:
        click.echo("Debug logging enabled")

    if ctx.invoked_subcommand is None:
        dispatcher = Dispatcher(AppState.from_config(config))
        if dispatcher.login_default():
            dispatcher.run()


@main.command()
@click.option("--pin", required=True, help="The transaction pin of the default account.")
@no_repl_option
@click.pass_context
def start(ctx: click.Context, pin: str, no_repl: bool) -> None:
    """
    Launch the CLI ATM Machine.

    Example:
      atm start --pin=1234
    """
    _run_transaction(ctx, CommandKind.START, no_repl, pin=pin)


@main.command()
@username_option
@pin_option
@no_repl_option
@click.pass_context
def createaccount(ctx: click.Context, username: str, pin: str, no_repl: bool) -> None:
    """
    Create a bank account. Existing accounts are never overwritten.

    Example:
      atm createaccount --username=alice --pin=0000
    """
    _run_transaction(ctx, CommandKind.CREATE_ACCOUNT, no_repl, username=username, pin=pin)


@main.command()
@amount_option
@username_option
@pin_option
@no_repl_option
@click.pass_context
def deposit(ctx: click.Context, amount: str, username: str, pin: str, no_repl: bool) -> None:
    """
    Deposit an amount into an account.

    Example:
      atm deposit --amount=2000 --username=philemon --pin=1234
    """
    _run_transaction(ctx, CommandKind.DEPOSIT, no_repl, amount=amount, username=username, pin=pin)


@main.command()
@amount_option
@username_option
@pin_option
@no_repl_option
@click.pass_context
def withdraw(ctx: click.Context, amount: str, username: str, pin: str, no_repl: bool) -> None:
    """
    Withdraw an amount from an account.

    Example:
      atm withdraw --amount=2000 --username=philemon --pin=1234
    """
    _run_transaction(ctx, CommandKind.WITHDRAW, no_repl, amount=amount, username=username, pin=pin)


@main.command()
@username_option
@pin_option
@no_repl_option
@click.pass_context
def balance(ctx: click.Context, username: str, pin: str, no_repl: bool) -> None:
    """
    Check an account's balance.

    Example:
      atm balance --username=philemon --pin=1234
    """
    _run_transaction(ctx, CommandKind.BALANCE, no_repl, username=username, pin=pin)


@main.command()
@username_option
@pin_option
@click.option("--newpin", required=True, help="New account transaction pin.")
@no_repl_option
@click.pass_context
def changepin(ctx: click.Context, username: str, pin: str, newpin: str, no_repl: bool) -> None:
    """
    Change an account's transaction pin.

    Example:
      atm changepin --username=philemon --pin=1234 --newpin=3456
    """
    _run_transaction(ctx, CommandKind.CHANGE_PIN, no_repl, username=username, pin=pin, newpin=newpin)


@main.command()
@click.pass_context
def logout(ctx: click.Context) -> None:
    """Shut down the program."""
    _run_transaction(ctx, CommandKind.LOGOUT, no_repl=True)


@main.command(name="help")
@no_repl_option
@click.pass_context
def help_command(ctx: click.Context, no_repl: bool) -> None:
    """List the ATM commands available at the prompt."""
    _run_transaction(ctx, CommandKind.HELP, no_repl)


@main.command()
def version() -> None:
    """Show version information."""
    from atm import __author__, __version__

    click.echo(f"CLI ATM Machine v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = _config_from(ctx)
    settings = config_obj.to_dict()

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {settings['environment']}")
    click.echo(f"  Default Username: {settings['accounts']['default_username']}")
    click.echo(f"  Default Pin: {settings['accounts']['default_pin']}")
    click.echo(f"  Default Balance: {config_obj.accounts.default_balance_money}")
    click.echo(f"  Opening Balance: {config_obj.accounts.opening_balance_money}")
    click.echo(f"  Debug Mode: {settings['debug']}")
    click.echo(f"  Log Level: {settings['log_level']}")


def run(argv: list[str] | None = None) -> None:
    """
    Console script entry point.

    Malformed startup arguments exit with status 1; logout and end of input
    exit with status 0.
    """
    try:
        rv = main.main(args=argv, prog_name="atm", standalone_mode=False)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(1)

    sys.exit(rv if isinstance(rv, int) else 0)


if __name__ == "__main__":
    run()
