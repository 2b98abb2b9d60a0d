#!/usr/bin/env python3
"""
Dispatcher - the ATM read-eval-prompt loop.

Reads a line of input, resolves it to a registered command, validates the
argument count, runs the handler and returns to the prompt. The loop is an
explicit state machine:

    AWAITING_COMMAND -> VALIDATING_ARITY -> EXECUTING -> AWAITING_COMMAND
                                                      -> TERMINATED (logout)

End of input in any state is treated as an implicit logout.
"""

import logging
import sys
from collections.abc import Callable
from enum import Enum

import click

from ..core.errors import ATMError, AuthenticationError, UnknownCommandError
from . import handlers
from .commands import ArityError, Command, CommandKind, bind_arguments, tokenize
from .handlers import SEPARATOR, TransactionResult
from .state import AppState

logger = logging.getLogger(__name__)

# Returns the next raw line, or None at end of input.
LineReader = Callable[[], str | None]


class ReplState(Enum):
    """States of the dispatcher loop."""

    AWAITING_COMMAND = "awaiting_command"
    VALIDATING_ARITY = "validating_arity"
    EXECUTING = "executing"
    TERMINATED = "terminated"


def read_stdin_line() -> str | None:
    """Read one line from standard input; None at end of stream."""
    try:
        line = sys.stdin.readline()
    except OSError as e:
        logger.warning(f"Error reading standard input, treating as end of input: {e}")
        return None
    return line if line else None


class Dispatcher:
    """
    Drives a single ATM session over a line-oriented input source.

    Output goes through click.echo: informational text to stdout, error
    messages to stderr.
    """

    def __init__(self, state: AppState, reader: LineReader | None = None):
        self.state = state
        self.reader = reader or read_stdin_line

    # Input

    def read_tokens(self) -> list[str] | None:
        """
        Block until a non-blank line is read.

        Returns:
            Tokens of the line, or None at end of input
        """
        while True:
            line = self.reader()
            if line is None:
                return None
            tokens = tokenize(line)
            if tokens:
                return tokens

    # Output

    def report(self, result: TransactionResult) -> None:
        if result.lines:
            click.echo(result.message)

    def report_error(self, error: Exception) -> None:
        click.echo(str(error), err=True)

    def show_prompt(self) -> None:
        registry = self.state.registry
        help_index = registry.index_of(CommandKind.HELP)
        logout_index = registry.index_of(CommandKind.LOGOUT)

        click.echo(SEPARATOR)
        if self.state.session_username:
            click.echo(f"Logged in as {self.state.session_username.upper()}")
        click.echo(f"Do you wish to perform other transactions? For help enter: {help_index}")
        click.echo(f"If you don't wish to continue, exit the app with: {logout_index}")
        click.echo(SEPARATOR)
        click.echo("Enter a valid command")

    def show_usage(self, command: Command, error: ArityError | None = None) -> None:
        if error is not None and error.detail:
            click.echo(error.detail, err=True)
        click.echo(command.usage)
        click.echo(command.example)

    # Execution

    def execute(self, command: Command, args: dict[str, str]) -> TransactionResult:
        """
        Run the handler for command.

        Raises:
            ATMError: Whatever the handler raises
        """
        kind = command.kind
        state = self.state

        if kind is CommandKind.CREATE_ACCOUNT:
            return handlers.create_account(state, args["username"], args["pin"])
        elif kind is CommandKind.DEPOSIT:
            return handlers.deposit(state, args["amount"], args["username"], args["pin"])
        elif kind is CommandKind.WITHDRAW:
            return handlers.withdraw(state, args["amount"], args["username"], args["pin"])
        elif kind is CommandKind.BALANCE:
            return handlers.check_balance(state, args["username"], args["pin"])
        elif kind is CommandKind.CHANGE_PIN:
            return handlers.change_pin(state, args["username"], args["pin"], args["newpin"])
        elif kind is CommandKind.START:
            return handlers.start(state, args["pin"])
        elif kind is CommandKind.HELP:
            return handlers.show_help(state)
        elif kind is CommandKind.LOGOUT:
            return handlers.logout(state)
        else:
            raise ValueError(f"Unhandled command kind: {kind}")

    def dispatch(self, command: Command, args: dict[str, str]) -> bool:
        """
        Execute command and report the outcome.

        Returns:
            True if the session should terminate
        """
        try:
            result = self.execute(command, args)
        except ATMError as e:
            logger.info(f"{command.name} failed: {e.__class__.__name__}")
            self.report_error(e)
            return False

        self.report(result)
        return result.terminate

    def end_of_input(self) -> ReplState:
        """Treat end of input as an implicit logout."""
        logger.debug("End of input reached")
        self.report(handlers.logout(self.state))
        return ReplState.TERMINATED

    # Loops

    def login_default(self) -> bool:
        """
        Prompt for the default account pin until it matches.

        Returns:
            True once logged in, False if input ended first
        """
        command = self.state.registry.get(CommandKind.START)
        while True:
            click.echo("Enter the pin for the default account, e.g 1234")
            tokens = self.read_tokens()
            if tokens is None:
                self.end_of_input()
                return False

            try:
                args = bind_arguments(command, tokens)
            except ArityError as e:
                self.show_usage(command, e)
                continue

            try:
                result = handlers.start(self.state, args["pin"])
            except AuthenticationError as e:
                self.report_error(e)
                continue

            self.report(result)
            return True

    def run(self) -> None:
        """Run the read-eval-prompt loop until logout or end of input."""
        registry = self.state.registry
        repl_state = ReplState.AWAITING_COMMAND
        command: Command | None = None
        tokens: list[str] = []
        args: dict[str, str] = {}

        while repl_state is not ReplState.TERMINATED:
            if repl_state is ReplState.AWAITING_COMMAND:
                self.show_prompt()
                line = self.read_tokens()
                if line is None:
                    repl_state = self.end_of_input()
                    continue

                try:
                    command, tokens = registry.resolve(line)
                except UnknownCommandError as e:
                    logger.debug(f"Unknown command: {e.token}")
                    self.report_error(e)
                    continue

                repl_state = ReplState.VALIDATING_ARITY

            elif repl_state is ReplState.VALIDATING_ARITY and command is not None:
                try:
                    args = bind_arguments(command, tokens)
                except ArityError as e:
                    self.show_usage(command, e)
                    if command.arity == 0:
                        # A non-blank line can never supply zero arguments.
                        repl_state = ReplState.AWAITING_COMMAND
                        continue
                    line = self.read_tokens()
                    if line is None:
                        repl_state = self.end_of_input()
                    else:
                        tokens = line
                    continue

                repl_state = ReplState.EXECUTING

            elif repl_state is ReplState.EXECUTING and command is not None:
                if self.dispatch(command, args):
                    repl_state = ReplState.TERMINATED
                else:
                    repl_state = ReplState.AWAITING_COMMAND

            else:
                raise RuntimeError(f"Dispatcher reached {repl_state} without a command")
