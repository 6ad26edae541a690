from __future__ import annotations

import typer
from rich.table import Table
from textmagic_client import ApiError, ArgumentError, NetworkError

from .. import console
from ..config import load_config
from ..formatting import page_summary, resource_rows
from ..http import make_client

app = typer.Typer(help="Contacts commands.")


@app.command("list")
def list_contacts(
        page: int = typer.Option(1, "--page", help="Results page."),
        limit: int = typer.Option(10, "--limit", help="Results per page."),
        shared: bool = typer.Option(False, "--shared", help="Include shared contacts."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        data = client.get_contacts(page=page, limit=limit, shared=shared)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to list contacts: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    summary = page_summary(data)
    if summary:
        console.info(summary)

    table = Table(title="Contacts")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("phone")
    table.add_column("company")
    for c in resource_rows(data):
        name = f"{c.get('firstName') or ''} {c.get('lastName') or ''}".strip()
        table.add_row(
            str(c.get("id", "-")),
            name or "-",
            str(c.get("phone") or "-"),
            str(c.get("companyName") or "-"),
        )
    console.console.print(table)


@app.command("show")
def show_contact(
        contact_id: int = typer.Argument(..., help="Contact ID."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        contact = client.get_contact(contact_id)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to fetch contact: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    console.ok("Contact:")
    for key in ("id", "firstName", "lastName", "phone", "email", "companyName"):
        console.console.print(f"  {key}: {contact.get(key) or '-'}")
    country = contact.get("country") if isinstance(contact.get("country"), dict) else {}
    console.console.print(f"  country: {country.get('name') or '-'}")


@app.command("delete")
def delete_contact(
        contact_id: int = typer.Argument(..., help="Contact ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes and not typer.confirm(f"Delete contact {contact_id}?"):
        raise typer.Exit(code=0)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        client.delete_contact(contact_id)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to delete contact: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()
    console.ok(f"Contact {contact_id} deleted.")
