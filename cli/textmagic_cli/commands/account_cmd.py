from __future__ import annotations

import typer
from textmagic_client import ApiError, AuthError, NetworkError

from .. import console
from ..config import load_config
from ..formatting import format_balance
from ..http import make_client


def whoami(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Show the account behind the configured credentials."""
    client = make_client(load_config(), base_url_override=base_url)
    try:
        user = client.get_user_info()
    except AuthError:
        console.err("Unauthorized. Check username and API key.")
        raise typer.Exit(code=2)
    except (ApiError, NetworkError) as e:
        console.err(f"Failed to fetch account: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json(user)
        return

    timezone = user.get("timezone") if isinstance(user.get("timezone"), dict) else {}
    console.ok("Account:")
    console.console.print(f"  id: {user.get('id')}")
    console.console.print(f"  username: {user.get('username')}")
    console.console.print(f"  name: {user.get('firstName') or ''} {user.get('lastName') or ''}".rstrip())
    console.console.print(f"  balance: {format_balance(user)}")
    console.console.print(f"  timezone: {timezone.get('timezone') or '-'}")
