import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

HUMAN_HELP_SENTINEL = "HUMAN_HELP_NEEDED"
WHATSAPP_PREFIX = "whatsapp:"
EMPTY_BODY_PLACEHOLDER = " "

MSG_HANDOFF_ACK = "تم تحويل طلبك إلى أحد موظفي خدمة العملاء، وسيتواصل معك قريباً. شكراً لصبرك 🙏"

_URL_RE = re.compile(r"https?://[^\s]+", re.IGNORECASE)
# Sentence punctuation glued to the end of a link (Latin and Arabic comma)
_URL_TRAILING_CHARS = ".,;:!?)]}>\"'،"
_WRAPPING_PAIRS = ("()", "[]", "{}", "<>", "\"\"", "''")


class ReplyKind(str, Enum):
    TEXT = "text"
    ESCALATE = "escalate"


@dataclass(frozen=True)
class BotReply:
    kind: ReplyKind
    text: str = ""

    @property
    def is_escalation(self) -> bool:
        return self.kind == ReplyKind.ESCALATE


@dataclass(frozen=True)
class OutboundMessage:
    body: str
    media_url: Optional[str] = None


def classify_reply(text: str) -> BotReply:
    """Exact match on the sentinel; anything else is literal text to send."""
    if text == HUMAN_HELP_SENTINEL:
        return BotReply(kind=ReplyKind.ESCALATE)
    return BotReply(kind=ReplyKind.TEXT, text=text)


def text_reply(text: str) -> BotReply:
    return BotReply(kind=ReplyKind.TEXT, text=text)


def _find_media_url(text: str) -> Optional[tuple[str, int, int]]:
    """First link in the text with trailing punctuation dropped, plus the span to cut from the body."""
    for match in _URL_RE.finditer(text):
        url = match.group(0).rstrip(_URL_TRAILING_CHARS)
        if "://" not in url or url.endswith("://"):
            continue
        start, end = match.start(), match.start() + len(url)
        if start > 0 and end < len(text) and text[start - 1] + text[end] in _WRAPPING_PAIRS:
            start, end = start - 1, end + 1
        return url, start, end
    return None


def format_outbound(text: str) -> OutboundMessage:
    """Move the first bare URL out of the body into the media attachment."""
    text = text or ""
    found = _find_media_url(text)
    if found is None:
        return OutboundMessage(body=text)

    url, start, end = found
    head, tail = text[:start], text[end:]
    if tail[:1] and tail[:1] in _URL_TRAILING_CHARS:
        head = head.rstrip()
    body = (head + tail).strip()
    if not body:
        body = EMPTY_BODY_PLACEHOLDER
    return OutboundMessage(body=body, media_url=url)


def normalize_whatsapp_address(address: str) -> str:
    address = (address or "").strip()
    if address.lower().startswith(WHATSAPP_PREFIX):
        return address
    return f"{WHATSAPP_PREFIX}{address}"


def format_support_notification(customer_address: str, user_message: str) -> str:
    return f"🔔 طلب تحويل لموظف بشري\n\nالعميل: {customer_address}\n\nرسالة العميل:\n{user_message}"
