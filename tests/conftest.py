"""Root pytest configuration for all tests."""

import logging

import pytest

# Keep urllib3 connection chatter out of captured logs
logging.getLogger("urllib3").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test without Outline credentials and outside the repo.

    Tests that need a token set it explicitly. A developer's .env or
    .outline-import/config.yaml is never picked up.
    """
    monkeypatch.delenv("OUTLINE_API_TOKEN", raising=False)
    monkeypatch.delenv("OUTLINE_HOST", raising=False)
    monkeypatch.setattr(
        "outline_import.outline_client.auth.load_dotenv",
        lambda *args, **kwargs: False,
    )
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attached so they do not outlive the test's streams."""
    yield
    app_logger = logging.getLogger("outline_import")
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
