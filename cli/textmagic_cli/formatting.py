from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def format_timestamp(value: datetime | str | None) -> str:
    if not value:
        return "-"
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value)
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return text
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M")


def shorten(text: str | None, width: int = 40) -> str:
    value = " ".join(str(text or "").split())
    if not value:
        return "-"
    if len(value) <= width:
        return value
    return value[: width - 1] + "…"


def format_balance(user: dict[str, Any]) -> str:
    balance = user.get("balance")
    if balance is None:
        return "-"
    currency = user.get("currency") if isinstance(user.get("currency"), dict) else {}
    code = currency.get("id") or ""
    return f"{float(balance):.2f} {code}".strip()


def page_summary(data: Any) -> str | None:
    if not isinstance(data, dict) or "page" not in data:
        return None
    return f"page={data.get('page')}/{data.get('pageCount', '?')} limit={data.get('limit')}"


def resource_rows(data: Any) -> list[dict[str, Any]]:
    rows = data.get("resources") if isinstance(data, dict) else data
    if not isinstance(rows, list):
        return []
    return [row for row in rows if isinstance(row, dict)]
