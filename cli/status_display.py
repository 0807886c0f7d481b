"""Token status display for the CLI"""

from datetime import datetime
from typing import Optional

from rich.table import Table

from oauth import Authenticator


def mask_token(token: Optional[str]) -> str:
    """Show only the first and last four characters of a token"""
    if not token:
        return "-"
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}...{token[-4:]}"


def format_time_remaining(seconds: Optional[int]) -> str:
    """Human readable time until expiry, e.g. "3h 59m" or "expired" """
    if seconds is None:
        return "unknown"
    if seconds <= 0:
        return "expired"

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_expiry(expires_epoch: int) -> str:
    """Local ISO timestamp for an expiry, or the raw epoch if out of range"""
    try:
        return datetime.fromtimestamp(expires_epoch).isoformat(timespec="seconds")
    except (OverflowError, OSError, ValueError):
        return f"epoch {expires_epoch}"


def build_token_table(auth: Authenticator) -> Table:
    """
    Build a table describing the authenticator's token state

    Args:
        auth: Authenticator instance

    Returns:
        Rich table, token values masked
    """
    table = Table(title="Token Status")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Access Token", mask_token(auth.access_token))
    table.add_row("Refresh Token", mask_token(auth.refresh_token))
    table.add_row("Scope", auth.scope or "-")

    if auth.expires_epoch is not None:
        table.add_row("Expires At", format_expiry(auth.expires_epoch))
    table.add_row("Time Until Expiry", format_time_remaining(auth.seconds_until_expiry()))

    return table


def show_token_status(auth: Authenticator, console):
    """Print the token status table"""
    console.print(build_token_table(auth))
