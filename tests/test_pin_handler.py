import io
from unittest.mock import MagicMock, patch

from api.pin import handler
from core.pin_service import PinResponse


def _make_handler(path: str) -> handler:
    # Skip BaseHTTPRequestHandler.__init__, which wants a live socket
    h = handler.__new__(handler)
    h.path = path
    h.wfile = io.BytesIO()
    h.send_response = MagicMock()
    h.send_header = MagicMock()
    h.end_headers = MagicMock()
    return h


@patch("api.pin.handle_pin_request")
def test_do_get_writes_pipeline_response(mock_handle):
    mock_handle.return_value = PinResponse(
        status=200,
        body="<svg>ok</svg>",
        headers={"Content-Type": "image/svg+xml;charset=utf-8", "Cache-Control": "public, max-age=60"},
    )
    h = _make_handler("/api/pin?username=alice&repo=repo1&theme=dark")
    h.do_GET()

    query = mock_handle.call_args[0][0]
    assert query == {"username": ["alice"], "repo": ["repo1"], "theme": ["dark"]}
    h.send_response.assert_called_once_with(200)
    h.send_header.assert_any_call("Content-Type", "image/svg+xml;charset=utf-8")
    h.send_header.assert_any_call("Cache-Control", "public, max-age=60")
    h.end_headers.assert_called_once()
    assert h.wfile.getvalue() == b"<svg>ok</svg>"


def test_do_get_missing_params_is_400():
    h = _make_handler("/api/pin")
    h.do_GET()

    h.send_response.assert_called_once_with(400)
    assert b"Missing" in h.wfile.getvalue()
