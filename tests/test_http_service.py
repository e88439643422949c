import pytest
import requests
from unittest.mock import Mock

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError, HttpStatusError
from wordcrawl.services.http_service import HttpService, is_html


def test_fetch_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'hello world'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 200
    assert response.text == 'hello world'


def test_fetch_sends_user_agent_and_timeout():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = ''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client, timeout=3)
    http.fetch('http://example.com')
    mock_http_client.assert_called_once_with('http://example.com', headers={'User-Agent': 'TestAgent'}, timeout=3)


def test_fetch_wraps_requests_exception():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.Timeout("timed out")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    try:
        http.fetch('http://example.com')
        assert False, "expected HttpFetchError"
    except HttpFetchError as e:
        assert "http://example.com" in str(e)
        assert isinstance(e.original, requests.exceptions.Timeout)


def test_fetch_content_type_from_headers():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = '<html>test</html>'
    mock_http_client.return_value.headers = {'Content-Type': 'text/html; charset=utf-8'}
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.content_type == 'text/html; charset=utf-8'


def test_fetch_missing_content_type():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'data'
    mock_http_client.return_value.headers = {}
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.content_type is None


def _client(status_code, text, headers):
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = status_code
    mock_http_client.return_value.text = text
    mock_http_client.return_value.headers = headers
    return mock_http_client


def test_fetch_html_returns_html_page():
    http = HttpService(user_agent='TestAgent', http_client=_client(200, '<p>hi</p>', {'Content-Type': 'text/html; charset=utf-8'}))
    response = http.fetch_html('http://example.com')
    assert response.text == '<p>hi</p>'


def test_fetch_html_non_success_status_raises():
    http = HttpService(user_agent='TestAgent', http_client=_client(404, 'gone', {'Content-Type': 'text/html'}))
    with pytest.raises(HttpStatusError) as excinfo:
        http.fetch_html('http://example.com/missing')
    assert excinfo.value.status_code == 404


def test_fetch_html_skips_non_html_documents():
    http = HttpService(user_agent='TestAgent', http_client=_client(200, '%PDF-1.4', {'Content-Type': 'application/pdf'}))
    assert http.fetch_html('http://example.com/a.pdf') is None


def test_is_html_accepts_missing_content_type():
    assert is_html(HttpResponse(200, '<p>x</p>'))
    assert is_html(HttpResponse(200, '', 'application/xhtml+xml'))
    assert not is_html(HttpResponse(200, '', 'text/plain'))
