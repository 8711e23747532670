# test_frontend_config.py

import pytest
from pydantic import ValidationError

from article_frontend.config import FrontendSettings


def test_defaults():
    settings = FrontendSettings(_env_file=None)

    assert settings.content_preview_length == 200
    assert settings.articles_api_base.endswith("/api")


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("ARTICLES_API_BASE", "http://backend:5001/api/")
    monkeypatch.setenv("ARTICLES_API_TIMEOUT", "2.5")

    settings = FrontendSettings(_env_file=None)

    assert settings.articles_api_base == "http://backend:5001/api"
    assert settings.articles_api_timeout == 2.5


def test_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        FrontendSettings(_env_file=None, articles_api_timeout=0)


def test_display_timezone_defaults_to_local():
    settings = FrontendSettings(_env_file=None)

    assert settings.display_timezone is None
    assert settings.display_tzinfo is None


def test_display_timezone_from_environment(monkeypatch):
    monkeypatch.setenv("DISPLAY_TIMEZONE", "Europe/Berlin")

    settings = FrontendSettings(_env_file=None)

    assert settings.display_tzinfo is not None
    assert str(settings.display_tzinfo) == "Europe/Berlin"


def test_rejects_unknown_display_timezone():
    with pytest.raises(ValidationError):
        FrontendSettings(_env_file=None, display_timezone="Mars/Olympus_Mons")
