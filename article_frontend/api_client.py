# api_client.py

"""
HTTP client for the article API.
"""

from typing import Any, Dict, List, Optional

import requests

from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="article-api-client",
    logger_type=LoggerType.PRINT,
    level=LogLevel.INFO,
)


class ArticleApiError(Exception):
    """Raised when the article API cannot be reached or reports a failure"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ArticleApiClient:
    """Thin wrapper around the `/articles` endpoints"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self, method: str, path: str, payload: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method, url, json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"{method.upper()} {url} failed: {e}")
            raise ArticleApiError(f"Could not reach the article API: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            raise ArticleApiError(
                message or f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        if not isinstance(body, dict) or not body.get("success"):
            message = body.get("message") if isinstance(body, dict) else None
            raise ArticleApiError(
                message or "Unexpected response from the article API",
                status_code=response.status_code,
            )
        return body

    def list_articles(self) -> List[Dict[str, Any]]:
        """
        Fetch all articles, newest first

        Returns:
            List[Dict[str, Any]]: Article payloads as returned by the API

        Raises:
            ArticleApiError: On transport errors or a failed response
        """
        logger.info("🔍 Loading articles...")
        body = self._request("get", "/articles")
        articles = body.get("data") or []
        logger.info(f"✅ Articles loaded: {len(articles)}")
        return articles

    def create_article(self, title: str, content: str) -> Dict[str, Any]:
        """
        Publish a new article

        Args:
            title: Article title
            content: Article body

        Returns:
            Dict[str, Any]: The stored article

        Raises:
            ArticleApiError: On transport errors or a failed response
        """
        body = self._request(
            "post", "/articles", payload={"title": title, "content": content}
        )
        return body["data"]
