from __future__ import annotations

import typer
from rich.table import Table
from textmagic_client import ApiError, ArgumentError, NetworkError

from .. import console
from ..config import load_config
from ..formatting import resource_rows
from ..http import make_client

app = typer.Typer(help="Contact lists commands.")


@app.command("list")
def list_lists(
        page: int = typer.Option(1, "--page", help="Results page."),
        limit: int = typer.Option(10, "--limit", help="Results per page."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        data = client.get_lists(page=page, limit=limit)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to list lists: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    table = Table(title="Lists")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("members")
    table.add_column("shared")
    for item in resource_rows(data):
        table.add_row(
            str(item.get("id", "-")),
            str(item.get("name") or "-"),
            str(item.get("membersCount", "-")),
            "yes" if item.get("shared") else "no",
        )
    console.console.print(table)


@app.command("contacts")
def list_members(
        list_id: int = typer.Argument(..., help="List ID."),
        page: int = typer.Option(1, "--page", help="Results page."),
        limit: int = typer.Option(10, "--limit", help="Results per page."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        data = client.get_list_contacts(list_id, page=page, limit=limit)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to list members of list {list_id}: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()
    console.print_json(data)
