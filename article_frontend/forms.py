# forms.py

"""
Client-side validation for the new-article form.
"""

from typing import Optional, Tuple

EMPTY_FIELDS_MESSAGE = "Please fill in both title and content fields."


def clean_article_form(
    title: Optional[str], content: Optional[str]
) -> Tuple[str, str, Optional[str]]:
    """
    Trim the submitted fields and check that neither is empty.

    Returns:
        Tuple[str, str, Optional[str]]: Trimmed title, trimmed content and an
        error message, which is None when the form can be submitted
    """
    title = (title or "").strip()
    content = (content or "").strip()
    if not title or not content:
        return title, content, EMPTY_FIELDS_MESSAGE
    return title, content, None
