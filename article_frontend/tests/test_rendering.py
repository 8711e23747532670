# test_rendering.py

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from markdown_it import MarkdownIt

from article_frontend.rendering import (
    ArticleCard,
    ViewState,
    article_icon,
    build_cards,
    escape_multiline,
    escape_text,
    format_article_date,
    resolve_view_state,
    truncate_content,
)


def api_article(**overrides):
    data = {
        "id": "65a1b2c3d4e5f60718293a4b",
        "title": "Phishing 101",
        "content": "A" * 250,
        "date": "2024-01-05T15:07:00Z",
    }
    data.update(overrides)
    return data


class TestViewState:
    def test_loading_before_any_result(self):
        assert resolve_view_state(None) == ViewState.LOADING

    def test_empty_list(self):
        assert resolve_view_state([]) == ViewState.EMPTY

    def test_list(self):
        assert resolve_view_state([api_article()]) == ViewState.LIST

    def test_error_wins(self):
        assert resolve_view_state([], error="HTTP error! status: 500") == ViewState.ERROR


class TestTruncation:
    def test_short_content_untouched(self):
        assert truncate_content("A" * 200) == "A" * 200

    def test_long_content_truncated_to_203(self):
        truncated = truncate_content("A" * 250)

        assert len(truncated) == 203
        assert truncated.endswith("...")


class TestArticleCard:
    def test_short_content_has_no_toggle(self):
        card = ArticleCard.from_api(api_article(content="B" * 200))

        assert card.needs_read_more is False
        assert card.toggle_label is None
        assert card.display_content == "B" * 200

    def test_long_content_shows_truncated_with_toggle(self):
        card = ArticleCard.from_api(api_article())

        assert card.needs_read_more is True
        assert card.toggle_label == "Read More ↓"
        assert len(card.content) == 250
        assert len(card.display_content) == 203

    def test_toggle_alternates_without_losing_content(self):
        card = ArticleCard.from_api(api_article())

        card.toggle()
        assert card.display_content == "A" * 250
        assert card.toggle_label == "Read Less ↑"

        card.toggle()
        assert card.display_content == "A" * 200 + "..."
        assert card.toggle_label == "Read More ↓"
        assert card.content == "A" * 250

    def test_toggle_is_noop_for_short_content(self):
        card = ArticleCard.from_api(api_article(content="short"))

        card.toggle()

        assert card.expanded is False

    def test_accepts_mongo_style_id(self):
        data = api_article()
        data["_id"] = data.pop("id")

        assert ArticleCard.from_api(data).id == "65a1b2c3d4e5f60718293a4b"

    def test_render_html_escapes_user_text(self):
        card = ArticleCard.from_api(
            api_article(
                title="<script>alert('x')</script>",
                content='<img src=x onerror="steal()">',
            )
        )

        markup = card.render_html(tz=timezone.utc)

        assert "<script>" not in markup
        assert "&lt;script&gt;" in markup
        assert "<img" not in markup
        assert "&quot;steal()&quot;" in markup

    def test_render_html_keeps_markdown_in_paragraphs_inert(self):
        card = ArticleCard.from_api(
            api_article(
                content="Intro\n\n![x](http://evil.test/pixel.png) [click](http://evil.test)"
            )
        )

        markup = card.render_html(tz=timezone.utc)
        rendered = MarkdownIt("commonmark").render(markup)

        assert "\n" not in markup
        assert "Intro<br><br>![x]" in markup
        assert "<img" not in rendered
        assert "<a " not in rendered

    def test_escape_multiline_normalizes_line_endings(self):
        assert escape_multiline("a\r\nb\rc\n<d>") == "a<br>b<br>c<br>&lt;d&gt;"

    def test_render_html_marks_collapsed_and_expanded(self):
        card = ArticleCard.from_api(api_article())

        assert "article-content collapsed" in card.render_html(tz=timezone.utc)
        card.toggle()
        assert "article-content expanded" in card.render_html(tz=timezone.utc)

    def test_build_cards_respects_preview_length(self):
        cards = build_cards([api_article(content="C" * 60)], preview_length=50)

        assert cards[0].display_content == "C" * 50 + "..."


class TestIcons:
    @pytest.mark.parametrize(
        "title,icon",
        [
            ("Strong Passwords", "🔐"),
            ("Two-factor AUTH", "🔐"),
            ("Firewall rules", "🌐"),
            ("Virus alert", "🦠"),
            ("Data privacy", "📊"),
            ("AWS misconfigurations", "☁️"),
            ("Social engineering", "📱"),
            ("Phishing 101", "📧"),
            ("Zero trust", "🛡️"),
        ],
    )
    def test_icon_by_keyword(self, title, icon):
        assert article_icon(title) == icon

    def test_first_matching_keyword_wins(self):
        assert article_icon("Password phishing") == "🔐"


class TestFormatting:
    def test_escape_text(self):
        assert escape_text('a & b < "c"') == "a &amp; b &lt; &quot;c&quot;"

    def test_format_article_date(self):
        assert (
            format_article_date("2024-01-05T15:07:00Z", tz=timezone.utc)
            == "January 5, 2024, 03:07 PM"
        )

    def test_format_naive_datetime_as_utc(self):
        value = datetime(2023, 12, 31, 9, 30)

        assert format_article_date(value, tz=timezone.utc) == "December 31, 2023, 09:30 AM"

    def test_format_in_configured_timezone(self):
        assert (
            format_article_date("2024-01-05T15:07:00Z", tz=ZoneInfo("America/New_York"))
            == "January 5, 2024, 10:07 AM"
        )
