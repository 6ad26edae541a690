from __future__ import annotations

import dataclasses
from typing import Any, Container, Sequence

import httpx

from .args import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    convert_args,
    require_fields,
    require_id_list,
    require_numeric,
    require_pagination,
    require_phone,
)
from .config_types import ClientConfig
from .errors import ArgumentError, ConfigurationError
from .responses import SUCCESS_2XX, interpret
from .transport import Transport

_LIST_IDS_ERROR = "Specify a valid array of numeric list ids"
_CONTACT_IDS_ERROR = "Specify a valid array of numeric contact ids"


class TextmagicClient:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        if not cfg.username or not cfg.token or not cfg.base_url:
            raise ConfigurationError("No username or token supplied")
        self._t = Transport(cfg, transport=transport)

    @classmethod
    def from_credentials(cls, username: str, token: str, **options: Any) -> "TextmagicClient":
        transport = options.pop("transport", None)
        return cls(ClientConfig(username=username, token=token, **options), transport=transport)

    def __enter__(self) -> "TextmagicClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._t.close()

    # --- configuration accessors ---
    @property
    def config(self) -> ClientConfig:
        return self._t.config

    def _replace_config(self, **changes: Any) -> None:
        self._t.reconfigure(dataclasses.replace(self._t.config, **changes))

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self._replace_config(base_url=value)

    @property
    def username(self) -> str:
        return self.config.username

    @username.setter
    def username(self, value: str) -> None:
        self._replace_config(username=value)

    @property
    def token(self) -> str:
        return self.config.token

    @token.setter
    def token(self, value: str) -> None:
        self._replace_config(token=value)

    @property
    def user_agent(self) -> str:
        return self.config.user_agent

    @user_agent.setter
    def user_agent(self, value: str) -> None:
        self._replace_config(user_agent=value)

    # --- request pipeline ---
    def _call(
            self,
            method: str,
            path: str,
            args: dict[str, Any] | None = None,
            *,
            expected: int | Container[int] = 200,
            boolean: bool = False,
    ) -> Any:
        envelope = self._t.dispatch(method, path, args)
        return interpret(envelope, expected, boolean=boolean)

    def _get_by_id(self, resource: str, label: str, item_id: Any) -> Any:
        item_id = require_numeric(item_id, label)
        return self._call("GET", f"/{resource}/{item_id}")

    def _delete_by_id(self, resource: str, label: str, item_id: Any) -> bool:
        item_id = require_numeric(item_id, label)
        return self._call("DELETE", f"/{resource}/{item_id}", expected=204)

    def _get_page(self, path: str, page: Any, limit: Any, **extra: Any) -> Any:
        args = require_pagination(page, limit)
        args.update(extra)
        return self._call("GET", path, args)

    # --- user & tokens ---
    def get_user_info(self) -> dict[str, Any]:
        return self._call("GET", "/user")

    def set_user_info(
            self,
            *,
            first_name: str,
            last_name: str,
            company: str | None = None,
            timezone: int | None = None,
    ) -> bool:
        require_fields("firstName and lastName should be specified", first_name, last_name)
        args = {"firstName": first_name, "lastName": last_name, "company": company, "timezone": timezone}
        body = convert_args(args, namespace="user", decamelize_keys=True)
        return self._call("PUT", "/user", body, expected=204)

    def create_token(self, *, username: str, password: str) -> dict[str, Any]:
        require_fields("username and password should be specified", username, password)
        return self._call("POST", "/tokens", {"username": username, "password": password}, expected=(200, 201))

    def refresh_token(self) -> dict[str, Any]:
        return self._call("GET", "/tokens/refresh")

    # --- messages ---
    @staticmethod
    def _message_args(
            text: str | None,
            template_id: Any,
            phones: Sequence[str] | None,
            contacts: Sequence[Any] | None,
            lists: Sequence[Any] | None,
            sending_time: Any,
            cut_extra: bool,
            parts_count: int | None,
            reference_id: Any,
            sender: str | None,
            rrule: str | None,
    ) -> dict[str, Any]:
        if not text and not template_id:
            raise ArgumentError("Either text or templateId should be specified")
        if not (phones or contacts or lists):
            raise ArgumentError("Either phones, contacts or lists should be specified")
        return {
            "text": text,
            "templateId": template_id,
            "phones": phones,
            "contacts": contacts,
            "lists": lists,
            "sendingTime": sending_time,
            "cutExtra": cut_extra,
            "partsCount": parts_count,
            "referenceId": reference_id,
            "from": sender,
            "rrule": rrule,
        }

    def send(
            self,
            *,
            text: str | None = None,
            template_id: Any = None,
            phones: Sequence[str] | None = None,
            contacts: Sequence[Any] | None = None,
            lists: Sequence[Any] | None = None,
            sending_time: Any = None,
            cut_extra: bool = False,
            parts_count: int | None = None,
            reference_id: Any = None,
            sender: str | None = None,
            rrule: str | None = None,
    ) -> dict[str, Any]:
        """Send (or schedule) an outbound message.

        Returns the created resource link: a session for an immediate send, a
        bulk for large batches, a schedule when ``sending_time`` or ``rrule``
        is given. ``sender`` maps to the API's ``from`` argument.
        """
        args = self._message_args(
            text, template_id, phones, contacts, lists,
            sending_time, cut_extra, parts_count, reference_id, sender, rrule,
        )
        return self._call("POST", "/messages", args, expected=SUCCESS_2XX)

    def get_price(
            self,
            *,
            text: str | None = None,
            template_id: Any = None,
            phones: Sequence[str] | None = None,
            contacts: Sequence[Any] | None = None,
            lists: Sequence[Any] | None = None,
            sending_time: Any = None,
            cut_extra: bool = False,
            parts_count: int | None = None,
            reference_id: Any = None,
            sender: str | None = None,
            rrule: str | None = None,
    ) -> dict[str, Any]:
        """Check the price of a message without sending it (same arguments as send)."""
        args = self._message_args(
            text, template_id, phones, contacts, lists,
            sending_time, cut_extra, parts_count, reference_id, sender, rrule,
        )
        args["dummy"] = True
        return self._call("GET", "/messages/price", args)

    def get_message(self, message_id: Any) -> dict[str, Any]:
        return self._get_by_id("messages", "Message", message_id)

    def get_messages(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/messages", page, limit)

    def delete_message(self, message_id: Any) -> bool:
        return self._delete_by_id("messages", "Message", message_id)

    # --- replies ---
    def get_reply(self, reply_id: Any) -> dict[str, Any]:
        return self._get_by_id("replies", "Reply", reply_id)

    def get_replies(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/replies", page, limit)

    def delete_reply(self, reply_id: Any) -> bool:
        return self._delete_by_id("replies", "Reply", reply_id)

    # --- sessions ---
    def get_session(self, session_id: Any) -> dict[str, Any]:
        return self._get_by_id("sessions", "Session", session_id)

    def get_sessions(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/sessions", page, limit)

    def get_session_messages(
            self, session_id: Any, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT
    ) -> dict[str, Any]:
        session_id = require_numeric(session_id, "Session")
        return self._get_page(f"/sessions/{session_id}/messages", page, limit)

    def delete_session(self, session_id: Any) -> bool:
        return self._delete_by_id("sessions", "Session", session_id)

    # --- schedules ---
    def get_schedule(self, schedule_id: Any) -> dict[str, Any]:
        return self._get_by_id("schedules", "Schedule", schedule_id)

    def get_schedules(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/schedules", page, limit)

    def delete_schedule(self, schedule_id: Any) -> bool:
        return self._delete_by_id("schedules", "Schedule", schedule_id)

    # --- bulks ---
    def get_bulk(self, bulk_id: Any) -> dict[str, Any]:
        return self._get_by_id("bulks", "Bulk", bulk_id)

    def get_bulks(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/bulks", page, limit)

    # --- chats ---
    def get_chats(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/chats", page, limit)

    def get_chat(self, phone: str, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        phone = require_phone(phone)
        return self._get_page(f"/chats/{phone}", page, limit)

    # --- templates ---
    def get_template(self, template_id: Any) -> dict[str, Any]:
        return self._get_by_id("templates", "Template", template_id)

    def get_templates(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/templates", page, limit)

    def delete_template(self, template_id: Any) -> bool:
        return self._delete_by_id("templates", "Template", template_id)

    def add_template(self, *, name: str, body: str) -> dict[str, Any]:
        require_fields("Template name and body should be specified", name, body)
        return self._call("POST", "/templates", {"name": name, "body": body}, expected=201)

    def update_template(self, template_id: Any, *, name: str, body: str) -> dict[str, Any]:
        require_fields("Template id, name and body should be specified", template_id, name, body)
        template_id = require_numeric(template_id, "Template")
        wire = convert_args({"name": name, "body": body}, namespace="template", decamelize_keys=True)
        return self._call("PUT", f"/templates/{template_id}", wire, expected=201)

    # --- statistics & invoices ---
    def get_messaging_stats(self, *, by: str = "off", start: Any = None, end: Any = None) -> Any:
        """Messaging statistics grouped ``by`` "off", "day", "month" or "year"."""
        return self._call("GET", "/stats/messaging", {"by": by, "start": start, "end": end})

    def get_spending_stats(
            self,
            *,
            page: Any = DEFAULT_PAGE,
            limit: Any = DEFAULT_LIMIT,
            start: Any = None,
            end: Any = None,
    ) -> dict[str, Any]:
        return self._get_page("/stats/spending", page, limit, start=start, end=end)

    def get_invoices(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/invoices", page, limit)

    # --- contacts ---
    def get_contact(self, contact_id: Any) -> dict[str, Any]:
        return self._get_by_id("contacts", "Contact", contact_id)

    def get_contacts(
            self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT, shared: bool = False
    ) -> dict[str, Any]:
        return self._get_page("/contacts", page, limit, shared=shared)

    def delete_contact(self, contact_id: Any) -> bool:
        return self._delete_by_id("contacts", "Contact", contact_id)

    @staticmethod
    def _contact_args(
            phone: str,
            lists: Sequence[Any],
            first_name: str | None,
            last_name: str | None,
            email: str | None,
            company_name: str | None,
            country: str | None,
    ) -> dict[str, Any]:
        return {
            "firstName": first_name,
            "lastName": last_name,
            "phone": require_phone(phone),
            "email": email,
            "companyName": company_name,
            "country": country,
            "lists": require_id_list(lists, _LIST_IDS_ERROR),
        }

    def add_contact(
            self,
            *,
            phone: str,
            lists: Sequence[Any],
            first_name: str | None = None,
            last_name: str | None = None,
            email: str | None = None,
            company_name: str | None = None,
            country: str | None = None,
    ) -> dict[str, Any]:
        require_fields("Contact phone and at least one list should be specified", phone, lists)
        args = self._contact_args(phone, lists, first_name, last_name, email, company_name, country)
        return self._call("POST", "/contacts", args, expected=201)

    def update_contact(
            self,
            contact_id: Any,
            *,
            phone: str,
            lists: Sequence[Any],
            first_name: str | None = None,
            last_name: str | None = None,
            email: str | None = None,
            company_name: str | None = None,
            country: str | None = None,
    ) -> dict[str, Any]:
        require_fields("Contact ID, phone and at least one list should be specified", contact_id, phone, lists)
        contact_id = require_numeric(contact_id, "Contact")
        args = self._contact_args(phone, lists, first_name, last_name, email, company_name, country)
        return self._call("PUT", f"/contacts/{contact_id}", args, expected=201)

    def get_contact_lists(
            self, contact_id: Any, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT
    ) -> dict[str, Any]:
        contact_id = require_numeric(contact_id, "Contact")
        return self._get_page(f"/contacts/{contact_id}/lists", page, limit)

    # --- unsubscribers ---
    def get_unsubscribed_contact(self, unsubscriber_id: Any) -> dict[str, Any]:
        return self._get_by_id("unsubscribers", "Unsubscriber", unsubscriber_id)

    def get_unsubscribed_contacts(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/unsubscribers", page, limit)

    def unsubscribe_contact(self, phone: str) -> dict[str, Any]:
        phone = require_phone(phone)
        return self._call("POST", "/unsubscribers", {"phone": phone}, expected=201)

    # --- custom fields ---
    def get_custom_field(self, field_id: Any) -> dict[str, Any]:
        return self._get_by_id("customfields", "Custom field", field_id)

    def get_custom_fields(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/customfields", page, limit)

    def delete_custom_field(self, field_id: Any) -> bool:
        return self._delete_by_id("customfields", "Custom field", field_id)

    def add_custom_field(self, *, name: str) -> dict[str, Any]:
        require_fields("Custom field name should be specified", name)
        return self._call("POST", "/customfields", {"name": name}, expected=201)

    def update_custom_field(self, field_id: Any, *, name: str) -> dict[str, Any]:
        require_fields("Custom field ID and name should be specified", field_id, name)
        field_id = require_numeric(field_id, "Custom field")
        return self._call("PUT", f"/customfields/{field_id}", {"name": name}, expected=201)

    def update_custom_field_value(self, field_id: Any, *, contact_id: Any, value: Any) -> dict[str, Any]:
        require_fields("Custom field ID, value and contact ID should be specified", field_id, contact_id, value)
        field_id = require_numeric(field_id, "Custom field")
        contact_id = require_numeric(contact_id, "Contact")
        args = {"contactId": contact_id, "value": value}
        return self._call("PUT", f"/customfields/{field_id}/update", args, expected=201)

    # --- lists ---
    def get_list(self, list_id: Any) -> dict[str, Any]:
        return self._get_by_id("lists", "List", list_id)

    def get_lists(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/lists", page, limit)

    def delete_list(self, list_id: Any) -> bool:
        return self._delete_by_id("lists", "List", list_id)

    def add_list(self, *, name: str, description: str | None = None, shared: bool = False) -> dict[str, Any]:
        require_fields("List name should be specified", name)
        args = {"name": name, "description": description, "shared": shared}
        return self._call("POST", "/lists", args, expected=201)

    def add_contacts_to_list(self, list_id: Any, *, contacts: Sequence[Any]) -> dict[str, Any]:
        require_fields("List ID and at least one contact should be specified", list_id, contacts)
        list_id = require_numeric(list_id, "List")
        contacts = require_id_list(contacts, _CONTACT_IDS_ERROR)
        return self._call("PUT", f"/lists/{list_id}/contacts", {"contacts": contacts}, expected=201)

    def get_list_contacts(
            self, list_id: Any, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT
    ) -> dict[str, Any]:
        list_id = require_numeric(list_id, "List")
        return self._get_page(f"/lists/{list_id}/contacts", page, limit)

    def delete_contacts_from_list(self, list_id: Any, *, contacts: Sequence[Any]) -> bool:
        require_fields("List ID and at least one contact should be specified", list_id, contacts)
        list_id = require_numeric(list_id, "List")
        contacts = require_id_list(contacts, _CONTACT_IDS_ERROR)
        return self._call(
            "DELETE", f"/lists/{list_id}/contacts", {"contacts": contacts}, expected=(201, 204), boolean=True
        )

    # --- dedicated numbers ---
    def get_dedicated_number(self, number_id: Any) -> dict[str, Any]:
        return self._get_by_id("numbers", "Number", number_id)

    def get_dedicated_numbers(self, *, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
        return self._get_page("/numbers", page, limit)

    def search_dedicated_numbers(self, *, country: str, prefix: str | None = None) -> dict[str, Any]:
        require_fields("Country ID should be specified", country)
        return self._call("GET", "/numbers/available", {"country": country, "prefix": prefix})

    def buy_dedicated_number(self, *, phone: str, country: str, user_id: Any) -> dict[str, Any]:
        require_fields("All arguments are mandatory: phone, country and userId", phone, country, user_id)
        args = {"phone": require_phone(phone), "country": country, "userId": require_numeric(user_id, "User")}
        return self._call("POST", "/numbers", args, expected=201)

    def cancel_dedicated_number(self, number_id: Any) -> bool:
        return self._delete_by_id("numbers", "Dedicated number", number_id)
