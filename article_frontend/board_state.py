# board_state.py

"""
State transitions of the article board.

The Streamlit callbacks delegate here with ``st.session_state`` as the state
mapping, so loading and publishing can be exercised with a plain dict.
"""

from typing import Any, MutableMapping

from common.logger import LoggerFactory, LoggerType, LogLevel

from .api_client import ArticleApiClient, ArticleApiError
from .forms import clean_article_form
from .rendering import CONTENT_PREVIEW_LENGTH, build_cards

PUBLISH_FAILED_MESSAGE = "Error publishing article. Please try again."
PUBLISH_OK_MESSAGE = "Article published successfully!"

logger = LoggerFactory.get_logger(
    name="article-board",
    logger_type=LoggerType.PRINT,
    level=LogLevel.INFO,
)

State = MutableMapping[str, Any]


def init_state(state: State) -> None:
    state.setdefault("cards", None)
    state.setdefault("load_error", None)
    state.setdefault("reload", True)
    state.setdefault("show_form", False)
    state.setdefault("flash", None)
    state.setdefault("form_title", "")
    state.setdefault("form_content", "")


def load_articles(
    state: State,
    client: ArticleApiClient,
    preview_length: int = CONTENT_PREVIEW_LENGTH,
) -> None:
    """Fetch the list and replace the cached cards"""
    state["reload"] = False
    try:
        articles = client.list_articles()
    except ArticleApiError as e:
        logger.error(f"Error loading articles: {e.message}")
        state["cards"] = []
        state["load_error"] = e.message
        return
    state["cards"] = build_cards(articles, preview_length)
    state["load_error"] = None


def show_form(state: State) -> None:
    state["show_form"] = True


def hide_form(state: State) -> None:
    state["show_form"] = False
    state["form_title"] = ""
    state["form_content"] = ""


def submit_article(state: State, client: ArticleApiClient) -> bool:
    """
    Validate and publish the form contents.

    On success the form is cleared and hidden and the list is flagged for
    reload; on failure the form stays open with its input.

    Returns:
        bool: Whether the article was published
    """
    title, content, error = clean_article_form(
        state.get("form_title"), state.get("form_content")
    )
    if error:
        state["flash"] = ("warning", error)
        return False

    try:
        client.create_article(title=title, content=content)
    except ArticleApiError as e:
        logger.error(f"Error creating article: {e.message}")
        state["flash"] = ("error", PUBLISH_FAILED_MESSAGE)
        return False

    hide_form(state)
    state["reload"] = True
    state["flash"] = ("success", PUBLISH_OK_MESSAGE)
    return True
