from __future__ import annotations

import pytest

from textmagic_client.errors import ApiError, ArgumentError


def test_get_message_rejects_non_numeric_id(client, api) -> None:
    with pytest.raises(ArgumentError, match="should be numeric"):
        client.get_message("abc")
    assert api.requests == []


def test_get_message(client, api) -> None:
    api.reply(200, {"id": 4820993, "text": "hello"})
    assert client.get_message(4820993) == {"id": 4820993, "text": "hello"}
    assert api.last.method == "GET"
    assert api.last_path == "/messages/4820993"


def test_get_messages_sends_default_pagination(client, api) -> None:
    api.reply(200, [{"id": 1}])
    assert client.get_messages() == [{"id": 1}]
    assert api.last_path == "/messages"
    assert api.last_query == {"page": "1", "limit": "10"}


def test_get_messages_explicit_pagination(client, api) -> None:
    client.get_messages(page=3, limit="25")
    assert api.last_query == {"page": "3", "limit": "25"}


def test_get_messages_rejects_bad_pagination(client, api) -> None:
    with pytest.raises(ArgumentError, match="limit should be numeric"):
        client.get_messages(limit="many")
    assert api.requests == []


def test_delete_message(client, api) -> None:
    api.reply(204)
    assert client.delete_message(4820993) is True
    assert api.last.method == "DELETE"
    assert api.last_path == "/messages/4820993"


def test_delete_message_error_surfaces_server_message(client, api) -> None:
    api.reply(404, {"code": 404, "message": "Message not found"})
    with pytest.raises(ApiError, match="Message not found"):
        client.delete_message(1)


def test_send_requires_text_or_template(client, api) -> None:
    with pytest.raises(ArgumentError, match="Either text or templateId"):
        client.send(phones=["+1555000111"])
    assert api.requests == []


def test_send_requires_recipients(client, api) -> None:
    with pytest.raises(ArgumentError, match="Either phones, contacts or lists"):
        client.send(text="hi")
    assert api.requests == []


def test_send_posts_flattened_form(client, api) -> None:
    api.reply(201, {"id": 77})
    assert client.send(text="hi", phones=["+1555000111"]) == {"id": 77}
    assert api.last.method == "POST"
    assert api.last_path == "/messages"
    assert api.last_form == {"text": "hi", "phones": "+1555000111", "cutExtra": "0"}


def test_send_joins_all_recipient_kinds(client, api) -> None:
    api.reply(200, {"id": 1, "type": "session"})
    client.send(
        template_id=12,
        phones=["+111", "+222"],
        contacts=[5, 6],
        lists=["9"],
        sender="Acme",
        sending_time=1700000000,
        rrule="FREQ=DAILY",
        reference_id="ref-1",
        parts_count=2,
        cut_extra=True,
    )
    assert api.last_form == {
        "templateId": "12",
        "phones": "+111,+222",
        "contacts": "5,6",
        "lists": "9",
        "sendingTime": "1700000000",
        "cutExtra": "1",
        "partsCount": "2",
        "referenceId": "ref-1",
        "from": "Acme",
        "rrule": "FREQ=DAILY",
    }


def test_send_rejects_non_2xx(client, api) -> None:
    api.reply(400, {"message": "Invalid phone"})
    with pytest.raises(ApiError, match="Invalid phone"):
        client.send(text="hi", phones=["+1"])


def test_get_price_is_a_dummy_get(client, api) -> None:
    api.reply(200, {"total": 0.04, "parts": 1})
    assert client.get_price(text="hi", lists=[3]) == {"total": 0.04, "parts": 1}
    assert api.last.method == "GET"
    assert api.last_path == "/messages/price"
    assert api.last_query == {"text": "hi", "lists": "3", "cutExtra": "0", "dummy": "1"}


def test_get_price_requires_exactly_200(client, api) -> None:
    api.reply(201, {"total": 1})
    with pytest.raises(ApiError):
        client.get_price(text="hi", phones=["+1"])


def test_replies(client, api) -> None:
    api.reply(200, {"id": 9})
    assert client.get_reply("9") == {"id": 9}
    assert api.last_path == "/replies/9"

    client.get_replies(page=2)
    assert api.last_query == {"page": "2", "limit": "10"}

    api.reply(204)
    assert client.delete_reply(9) is True


def test_sessions(client, api) -> None:
    client.get_session(1011539)
    assert api.last_path == "/sessions/1011539"

    client.get_session_messages(1011539, limit=50)
    assert api.last_path == "/sessions/1011539/messages"
    assert api.last_query == {"page": "1", "limit": "50"}

    with pytest.raises(ArgumentError, match="Session ID should be numeric"):
        client.get_session_messages(None)

    api.reply(204)
    assert client.delete_session(1011539) is True


def test_schedules_and_bulks(client, api) -> None:
    client.get_schedules()
    assert api.last_path == "/schedules"
    client.get_schedule(4)
    assert api.last_path == "/schedules/4"
    api.reply(204)
    client.delete_schedule(4)
    assert api.last.method == "DELETE"

    client.get_bulks()
    assert api.last_path == "/bulks"
    client.get_bulk(8)
    assert api.last_path == "/bulks/8"


def test_chats(client, api) -> None:
    client.get_chats()
    assert api.last_path == "/chats"

    client.get_chat("+447860021130")
    assert api.last_path == "/chats/+447860021130"
    assert api.last_query == {"page": "1", "limit": "10"}

    with pytest.raises(ArgumentError, match="valid phone number"):
        client.get_chat("not-a-phone")
