import logging

import pytest

from takeout_opml.settings import settings
from takeout_opml.tools.utils import setup_logging, subscriptions_path


def test_default_settings():
    assert settings.output_file == "YouTubeChannels.opml"
    assert settings.subscriptions_path == "Takeout/YouTube and YouTube Music/subscriptions/subscriptions.csv"
    assert settings.opml.title == "YouTube channels"
    assert settings.log_level == "INFO"


def test_subscriptions_path_joins_takeout_layout(tmp_path):
    path = subscriptions_path(tmp_path, settings.subscriptions_path)
    assert path == tmp_path / "Takeout" / "YouTube and YouTube Music" / "subscriptions" / "subscriptions.csv"


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        setup_logging("LOUD")


def test_setup_logging_accepts_lowercase():
    setup_logging("debug")
    assert logging.getLogger("asyncio").level == logging.WARNING
