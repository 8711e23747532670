# rendering.py

"""
Pure rendering helpers for the article board.

Nothing here imports Streamlit, so the board's view logic can be tested on
its own: view-state resolution, content truncation with a read more/less
toggle, title icons, date formatting and HTML escaping of user text.
"""

import html
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import Any, Dict, List, Optional, Union

CONTENT_PREVIEW_LENGTH = 200
ELLIPSIS = "..."

# Checked in order; the first keyword found in the title wins
TITLE_ICONS = [
    (("password", "auth"), "🔐"),
    (("network", "firewall"), "🌐"),
    (("malware", "virus"), "🦠"),
    (("privacy", "data"), "📊"),
    (("cloud", "aws"), "☁️"),
    (("social", "media"), "📱"),
    (("email", "phishing"), "📧"),
]
DEFAULT_ICON = "🛡️"


class ViewState(str, Enum):
    """Mutually exclusive states of the article board"""

    LOADING = "loading"
    LIST = "list"
    EMPTY = "empty"
    ERROR = "error"


def resolve_view_state(
    articles: Optional[List[Any]], error: Optional[str] = None
) -> ViewState:
    """Pick the single state to show for a load outcome"""
    if error:
        return ViewState.ERROR
    if articles is None:
        return ViewState.LOADING
    if not articles:
        return ViewState.EMPTY
    return ViewState.LIST


def escape_text(text: str) -> str:
    """Escape user supplied text for insertion into HTML"""
    return html.escape(text, quote=True)


def escape_multiline(text: str) -> str:
    """
    Escape text and turn line breaks into ``<br>``.

    The result never contains a newline, so a Markdown renderer keeps the
    whole card inside one raw HTML block and never parses user text as
    Markdown.
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return escape_text(normalized).replace("\n", "<br>")


def needs_read_more(content: str, limit: int = CONTENT_PREVIEW_LENGTH) -> bool:
    return len(content) > limit


def truncate_content(content: str, limit: int = CONTENT_PREVIEW_LENGTH) -> str:
    """Shorten content to ``limit`` characters plus an ellipsis"""
    if not needs_read_more(content, limit):
        return content
    return content[:limit] + ELLIPSIS


def article_icon(title: str) -> str:
    lowered = title.lower()
    for keywords, icon in TITLE_ICONS:
        if any(keyword in lowered for keyword in keywords):
            return icon
    return DEFAULT_ICON


def parse_article_date(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        # Python < 3.11 does not accept a trailing "Z"
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_article_date(
    value: Union[str, datetime], tz: Optional[tzinfo] = None
) -> str:
    """
    Format a timestamp like ``January 5, 2024, 03:07 PM``.

    Args:
        value: ISO-8601 string or datetime
        tz: Target timezone; defaults to the local timezone of the process
    """
    local = parse_article_date(value).astimezone(tz)
    return f"{local:%B} {local.day}, {local:%Y}, {local:%I:%M %p}"


@dataclass
class ArticleCard:
    """
    One article on the board.

    ``content`` always holds the full text; what is displayed is derived from
    it and the ``expanded`` flag, so toggling never loses the original.
    """

    id: str
    title: str
    content: str
    date: datetime
    expanded: bool = False
    preview_length: int = field(default=CONTENT_PREVIEW_LENGTH, repr=False)

    @classmethod
    def from_api(
        cls, data: Dict[str, Any], preview_length: int = CONTENT_PREVIEW_LENGTH
    ) -> "ArticleCard":
        return cls(
            id=str(data.get("id") or data.get("_id")),
            title=data["title"],
            content=data["content"],
            date=parse_article_date(data["date"]),
            preview_length=preview_length,
        )

    @property
    def needs_read_more(self) -> bool:
        return needs_read_more(self.content, self.preview_length)

    @property
    def display_content(self) -> str:
        if self.expanded or not self.needs_read_more:
            return self.content
        return truncate_content(self.content, self.preview_length)

    @property
    def toggle_label(self) -> Optional[str]:
        if not self.needs_read_more:
            return None
        return "Read Less ↑" if self.expanded else "Read More ↓"

    @property
    def icon(self) -> str:
        return article_icon(self.title)

    def toggle(self) -> None:
        """Switch between full and truncated content"""
        if self.needs_read_more:
            self.expanded = not self.expanded

    def render_html(self, tz: Optional[tzinfo] = None) -> str:
        """Single-line card markup with every user supplied field escaped"""
        state_class = ""
        if self.needs_read_more:
            state_class = " expanded" if self.expanded else " collapsed"
        return (
            '<div class="article-card">'
            f'<div class="article-icon">{self.icon}</div>'
            f'<h3 class="article-title">{escape_multiline(self.title)}</h3>'
            f'<div class="article-content{state_class}">'
            f"{escape_multiline(self.display_content)}</div>"
            f'<div class="article-date">🕒 {format_article_date(self.date, tz)}</div>'
            "</div>"
        )


def build_cards(
    articles: List[Dict[str, Any]], preview_length: int = CONTENT_PREVIEW_LENGTH
) -> List[ArticleCard]:
    return [ArticleCard.from_api(item, preview_length) for item in articles]
