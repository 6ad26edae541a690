from __future__ import annotations

import typer
from rich.table import Table
from textmagic_client import ApiError, ArgumentError, NetworkError

from .. import console
from ..config import load_config
from ..formatting import format_timestamp, page_summary, resource_rows, shorten
from ..http import make_client

app = typer.Typer(help="Outbound messages and replies.")


@app.command("list")
def list_messages(
        page: int = typer.Option(1, "--page", help="Results page."),
        limit: int = typer.Option(10, "--limit", help="Results per page."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        data = client.get_messages(page=page, limit=limit)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to list messages: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    summary = page_summary(data)
    if summary:
        console.info(summary)

    table = Table(title="Sent messages")
    table.add_column("id", style="bold")
    table.add_column("receiver")
    table.add_column("time")
    table.add_column("status")
    table.add_column("text")
    for m in resource_rows(data):
        table.add_row(
            str(m.get("id", "-")),
            str(m.get("receiver") or "-"),
            format_timestamp(m.get("messageTime")),
            str(m.get("status") or "-"),
            shorten(m.get("text")),
        )
    console.console.print(table)


@app.command("show")
def show_message(
        message_id: int = typer.Argument(..., help="Message ID."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        message = client.get_message(message_id)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to fetch message: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()
    console.print_json(message)


def _recipients(phones: list[str] | None, contacts: list[int] | None, lists: list[int] | None) -> dict:
    return {
        "phones": list(phones) if phones else None,
        "contacts": list(contacts) if contacts else None,
        "lists": list(lists) if lists else None,
    }


@app.command("send")
def send_message(
        text: str | None = typer.Option(None, "--text", help="Message text."),
        template_id: int | None = typer.Option(None, "--template", help="Template ID used instead of text."),
        phones: list[str] | None = typer.Option(None, "--phone", help="E.164 phone number (repeatable)."),
        contacts: list[int] | None = typer.Option(None, "--contact", help="Contact ID (repeatable)."),
        lists: list[int] | None = typer.Option(None, "--list", help="List ID (repeatable)."),
        sender: str | None = typer.Option(None, "--from", help="Sender ID."),
        sending_time: int | None = typer.Option(None, "--at", help="Unix timestamp to schedule the message."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        result = client.send(
            text=text,
            template_id=template_id,
            sender=sender,
            sending_time=sending_time,
            **_recipients(phones, contacts, lists),
        )
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to send message: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json(result)
        return
    console.ok(f"Accepted: {result.get('type') or 'message'} id={result.get('id')}")


@app.command("price")
def price_message(
        text: str | None = typer.Option(None, "--text", help="Message text."),
        template_id: int | None = typer.Option(None, "--template", help="Template ID used instead of text."),
        phones: list[str] | None = typer.Option(None, "--phone", help="E.164 phone number (repeatable)."),
        contacts: list[int] | None = typer.Option(None, "--contact", help="Contact ID (repeatable)."),
        lists: list[int] | None = typer.Option(None, "--list", help="List ID (repeatable)."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        price = client.get_price(text=text, template_id=template_id, **_recipients(phones, contacts, lists))
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to check price: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    console.ok(f"total={price.get('total')} parts={price.get('parts')}")


@app.command("delete")
def delete_message(
        message_id: int = typer.Argument(..., help="Message ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes and not typer.confirm(f"Delete message {message_id}?"):
        raise typer.Exit(code=0)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        client.delete_message(message_id)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to delete message: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()
    console.ok(f"Message {message_id} deleted.")


@app.command("replies")
def list_replies(
        page: int = typer.Option(1, "--page", help="Results page."),
        limit: int = typer.Option(10, "--limit", help="Results per page."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), base_url_override=base_url)
    try:
        data = client.get_replies(page=page, limit=limit)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to list replies: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    table = Table(title="Inbound messages")
    table.add_column("id", style="bold")
    table.add_column("sender")
    table.add_column("time")
    table.add_column("text")
    for r in resource_rows(data):
        table.add_row(
            str(r.get("id", "-")),
            str(r.get("sender") or "-"),
            format_timestamp(r.get("messageTime")),
            shorten(r.get("text")),
        )
    console.console.print(table)


@app.command("delete-reply")
def delete_reply(
        reply_id: int = typer.Argument(..., help="Reply ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes and not typer.confirm(f"Delete reply {reply_id}?"):
        raise typer.Exit(code=0)
    client = make_client(load_config(), base_url_override=base_url)
    try:
        client.delete_reply(reply_id)
    except (ApiError, ArgumentError, NetworkError) as e:
        console.err(f"Failed to delete reply: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()
    console.ok(f"Reply {reply_id} deleted.")
