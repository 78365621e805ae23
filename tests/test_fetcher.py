from unittest.mock import Mock, patch

import requests

from mosque_directory.core.fetcher import PageFetcher

URL = "https://www.salatomatic.com/d/1"


def _response(text="<html>ok</html>", status_error=None):
    response = Mock()
    response.text = text
    response.raise_for_status = Mock(side_effect=status_error)
    return response


def test_fetch_uses_timeout_and_user_agent():
    fetcher = PageFetcher({"timeout_seconds": 5, "user_agent": "TestBot/1.0"})
    with patch.object(fetcher.session, "get", return_value=_response()) as get:
        assert fetcher.fetch(URL) == "<html>ok</html>"
    get.assert_called_once_with(URL, timeout=5.0)
    assert fetcher.session.headers["User-Agent"] == "TestBot/1.0"


def test_default_timeout():
    fetcher = PageFetcher({})
    with patch.object(fetcher.session, "get", return_value=_response()) as get:
        fetcher.fetch(URL)
    get.assert_called_once_with(URL, timeout=30.0)


def test_timeout_returns_none():
    fetcher = PageFetcher({})
    with patch.object(fetcher.session, "get", side_effect=requests.Timeout("slow")):
        assert fetcher.fetch(URL) is None


def test_http_error_returns_none():
    fetcher = PageFetcher({})
    error = requests.HTTPError("404 Client Error")
    with patch.object(fetcher.session, "get", return_value=_response(status_error=error)):
        assert fetcher.fetch(URL) is None


def test_every_call_goes_to_the_network():
    fetcher = PageFetcher({})
    with patch.object(fetcher.session, "get", return_value=_response()) as get:
        fetcher.fetch(URL)
        fetcher.fetch(URL)
    assert get.call_count == 2
