"""Application state passed explicitly into the dispatcher and handlers."""

from dataclasses import dataclass, field

from ..accounts.directory import AccountDirectory
from ..core.config import Config
from .commands import CommandRegistry


@dataclass
class AppState:
    """Everything a running ATM session owns."""

    directory: AccountDirectory
    default_username: str
    registry: CommandRegistry = field(default_factory=CommandRegistry)
    name: str = "CLI ATM Machine"
    session_username: str | None = None

    @classmethod
    def from_config(cls, config: Config) -> "AppState":
        """Build a fresh state with the configured default account seeded."""
        accounts = config.accounts
        directory = AccountDirectory.seeded(
            accounts.default_username,
            accounts.default_pin,
            accounts.default_balance_money,
            opening_balance=accounts.opening_balance_money,
        )
        return cls(
            directory=directory,
            default_username=accounts.default_username,
            name=config.name,
        )
