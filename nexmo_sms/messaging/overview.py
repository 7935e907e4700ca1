"""Plain-text overview of a send result, for terminals and logs."""

from __future__ import annotations

from nexmo_sms.models import SendResult

_STATUS_HEADER = "Status"
_ID_HEADER = "Message ID"


def format_overview(result: SendResult | None) -> str:
    if result is None:
        return "Cannot display an overview of this response"

    if result.message_count > 1:
        status = f"Your message was sent in {result.message_count} parts"
    elif result.message_count == 1:
        status = "Your message was sent"
    else:
        return "There was an error sending your message"

    rows = [(m.status_text, m.message_id if m.ok else "") for m in result.messages]
    status_width = max([len(_STATUS_HEADER), *(len(s) for s, _ in rows)])
    id_width = max([len(_ID_HEADER), *(len(i) for _, i in rows)])

    lines = [f"{status}:"]
    lines.append(f"  {_STATUS_HEADER.ljust(status_width)}   {_ID_HEADER.ljust(id_width)}")
    for status_text, message_id in rows:
        lines.append(f"  {status_text.ljust(status_width)}   {message_id.ljust(id_width)}")
    return "\n".join(lines) + "\n"
