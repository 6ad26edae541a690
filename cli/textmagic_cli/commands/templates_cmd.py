from __future__ import annotations

import typer
from rich.table import Table
from textmagic_client import ApiError, ArgumentError, NetworkError

from .. import console
from ..config import load_config
from ..formatting import format_timestamp, resource_rows, shorten
from ..http import make_client

app = typer.Typer(help="Message templates commands.")


@app.command("list")
def list_templates(
        page: int = typer.Option(1, "--page", help="Results page."),
        limit: int = typer.Option(10, "--limit", help="Results per page."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        data = client.get_templates(page=page, limit=limit)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to list templates: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    table = Table(title="Templates")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("modified")
    table.add_column("content")
    for t in resource_rows(data):
        table.add_row(
            str(t.get("id", "-")),
            str(t.get("name") or "-"),
            format_timestamp(t.get("lastModified")),
            shorten(t.get("content")),
        )
    console.console.print(table)


@app.command("delete")
def delete_template(
        template_id: int = typer.Argument(..., help="Template ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes and not typer.confirm(f"Delete template {template_id}?"):
        raise typer.Exit(code=0)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        client.delete_template(template_id)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to delete template: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()
    console.ok(f"Template {template_id} deleted.")
