# streamlit_app.py

"""
Streamlit board for the Cybersecurity Web Hub.

Run with ``streamlit run article_frontend/streamlit_app.py``.
"""

import streamlit as st

from article_frontend import board_state
from article_frontend.api_client import ArticleApiClient
from article_frontend.config import settings
from article_frontend.rendering import ViewState, resolve_view_state

GRID_COLUMNS = 3

st.set_page_config(page_title="Cybersecurity Web Hub", page_icon="🛡️", layout="wide")


@st.cache_resource
def get_client() -> ArticleApiClient:
    return ArticleApiClient(
        base_url=settings.articles_api_base, timeout=settings.articles_api_timeout
    )


# ---------------------------
# Callbacks
# ---------------------------
def on_show_form() -> None:
    board_state.show_form(st.session_state)


def on_hide_form() -> None:
    board_state.hide_form(st.session_state)


def on_submit() -> None:
    board_state.submit_article(st.session_state, get_client())


# ---------------------------
# Rendering
# ---------------------------
def render_flash() -> None:
    flash = st.session_state.pop("flash", None)
    if not flash:
        return
    kind, message = flash
    getattr(st, kind)(message)


def render_form() -> None:
    if not st.session_state["show_form"]:
        st.button("➕ Add Article", on_click=on_show_form)
        return

    with st.form("article_form"):
        st.text_input("Title", key="form_title", max_chars=200)
        st.text_area("Content", key="form_content", height=200)
        publish_col, cancel_col = st.columns(2)
        with publish_col:
            st.form_submit_button("Publish", type="primary", on_click=on_submit)
        with cancel_col:
            st.form_submit_button("Cancel", on_click=on_hide_form)


def render_board(placeholder) -> None:
    cards = st.session_state["cards"]
    state = resolve_view_state(cards, st.session_state["load_error"])

    with placeholder.container():
        if state == ViewState.LOADING:
            st.info("Loading articles...")
        elif state == ViewState.ERROR:
            st.error("Could not load articles. Please try again later.")
        elif state == ViewState.EMPTY:
            st.info("No articles yet. Be the first to publish one!")
        else:
            columns = st.columns(GRID_COLUMNS)
            for index, card in enumerate(cards):
                with columns[index % GRID_COLUMNS]:
                    # st.html skips the Markdown pass entirely
                    st.html(card.render_html(tz=settings.display_tzinfo))
                    if card.toggle_label:
                        st.button(
                            card.toggle_label,
                            key=f"toggle-{card.id}",
                            on_click=card.toggle,
                        )


def main() -> None:
    board_state.init_state(st.session_state)

    st.title("🛡️ Cybersecurity Web Hub")
    st.caption("Short reads on staying safe online")

    render_flash()
    render_form()

    st.subheader("Latest Articles")
    board = st.empty()
    if st.session_state["reload"]:
        board.info("Loading articles...")
        board_state.load_articles(
            st.session_state, get_client(), settings.content_preview_length
        )
    render_board(board)


main()
