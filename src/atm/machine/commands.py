#!/usr/bin/env python3
"""
Command Registry

Immutable descriptors for every command the ATM understands, and the logic
that turns raw input tokens into a command plus its bound arguments.

Commands can be invoked three ways:
- by index:  "1 2000 philemon 1234"
- by name:   "deposit 2000 philemon 1234"
- by flags:  "deposit --amount=2000 --username=philemon --pin=1234"
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

import click

from ..core.errors import UnknownCommandError


class CommandKind(Enum):
    """Every kind of command the dispatcher can execute."""

    CREATE_ACCOUNT = "createaccount"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    BALANCE = "balance"
    CHANGE_PIN = "changepin"
    LOGOUT = "logout"
    HELP = "help"
    START = "start"


@dataclass(frozen=True)
class Command:
    """Descriptor for a single registered command."""

    kind: CommandKind
    aliases: tuple[str, ...]
    params: tuple[str, ...]
    usage: str
    example: str

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def arity(self) -> int:
        """Exact number of arguments the command requires."""
        return len(self.params)

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)


class ArityError(Exception):
    """Raised when supplied arguments do not fit a command's parameters."""

    def __init__(self, command: Command, detail: str | None = None):
        self.command = command
        self.detail = detail
        super().__init__(detail or f"{command.name} requires {command.arity} argument(s)")


# Registry order is significant: positional invocation selects by index.
DEFAULT_COMMANDS: tuple[Command, ...] = (
    Command(
        kind=CommandKind.CREATE_ACCOUNT,
        aliases=("ca",),
        params=("username", "pin"),
        usage="To create a bank account, enter username and pin.",
        example="e.g philemon 1234  or  createaccount --username=philemon --pin=1234",
    ),
    Command(
        kind=CommandKind.DEPOSIT,
        aliases=("d",),
        params=("amount", "username", "pin"),
        usage="To deposit an amount into an account, enter the amount, username and pin.",
        example="e.g 2000 philemon 1234  or  deposit --amount=2000 --username=philemon --pin=1234",
    ),
    Command(
        kind=CommandKind.WITHDRAW,
        aliases=("w",),
        params=("amount", "username", "pin"),
        usage="To withdraw an amount from an account, enter the amount, username and pin.",
        example="e.g 2000 philemon 1234  or  withdraw --amount=2000 --username=philemon --pin=1234",
    ),
    Command(
        kind=CommandKind.BALANCE,
        aliases=("b",),
        params=("username", "pin"),
        usage="To check an account's balance, enter username and pin.",
        example="e.g philemon 1234  or  balance --username=philemon --pin=1234",
    ),
    Command(
        kind=CommandKind.CHANGE_PIN,
        aliases=("cp",),
        params=("username", "pin", "newpin"),
        usage="To change an account's transaction pin, enter username, old pin and new pin.",
        example="e.g philemon 1234 4567  or  changepin --username=philemon --pin=1234 --newpin=4567",
    ),
    Command(
        kind=CommandKind.LOGOUT,
        aliases=("exit", "cancel"),
        params=(),
        usage="To shutdown the program.",
        example="e.g logout",
    ),
    Command(
        kind=CommandKind.HELP,
        aliases=("h",),
        params=(),
        usage="To print this help message.",
        example="e.g help",
    ),
    Command(
        kind=CommandKind.START,
        aliases=("s", "login"),
        params=("pin",),
        usage="To log in to the default account, enter its pin.",
        example="e.g 1234  or  start --pin=1234",
    ),
)


class CommandRegistry:
    """
    Fixed, ordered sequence of commands.

    Resolves raw tokens against the registry by index, name or alias.
    """

    def __init__(self, commands: Sequence[Command] = DEFAULT_COMMANDS):
        self._commands: tuple[Command, ...] = tuple(commands)

        self._by_name: dict[str, Command] = {}
        for command in self._commands:
            for name in command.names:
                if name in self._by_name:
                    raise ValueError(f"Duplicate command name or alias: {name}")
                self._by_name[name] = command

    def find(self, token: str) -> Command:
        """
        Look up a command by index, name or alias.

        Raises:
            UnknownCommandError: If nothing matches
        """
        if token.isascii() and token.isdigit():
            index = int(token)
            if index < len(self._commands):
                return self._commands[index]
            raise UnknownCommandError(token)

        command = self._by_name.get(token.lower())
        if command is None:
            raise UnknownCommandError(token)
        return command

    def resolve(self, tokens: Sequence[str]) -> tuple[Command, list[str]]:
        """
        Split an input line into its command and argument tokens.

        Raises:
            UnknownCommandError: If the first token names no command
        """
        if not tokens:
            raise UnknownCommandError("")
        return self.find(tokens[0]), list(tokens[1:])

    def get(self, kind: CommandKind) -> Command:
        for command in self._commands:
            if command.kind is kind:
                return command
        raise KeyError(kind)

    def index_of(self, kind: CommandKind) -> int:
        return self._commands.index(self.get(kind))

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)


def tokenize(line: str) -> list[str]:
    """Split an input line on whitespace, dropping empty tokens."""
    return line.split()


def _flag_parser(command: Command) -> click.Command:
    """Build a click command that parses --flag=value arguments for command."""
    params: list[click.Parameter] = [
        click.Option([f"--{param}"], required=True, type=str) for param in command.params
    ]
    return click.Command(command.name, params=params, add_help_option=False)


def bind_arguments(command: Command, tokens: Sequence[str]) -> dict[str, str]:
    """
    Bind argument tokens to a command's named parameters.

    Flag-style tokens are parsed with click; anything else is taken
    positionally and must match the arity exactly.

    Raises:
        ArityError: If the tokens do not supply exactly the required arguments
    """
    if any(token.startswith("--") for token in tokens):
        try:
            ctx = _flag_parser(command).make_context(command.name, list(tokens))
        except click.UsageError as e:
            raise ArityError(command, e.format_message()) from e
        return {param: ctx.params[param] for param in command.params}

    if len(tokens) != command.arity:
        detail = None
        if tokens:
            detail = f"{command.name} requires {command.arity} argument(s), got {len(tokens)}"
        raise ArityError(command, detail)

    return dict(zip(command.params, tokens))
