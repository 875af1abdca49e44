"""
Vercel serverless function for repository pin cards.

  /api/pin?username=X&repo=Y
      &theme=radical|dark|light|github_dark|github_light|dracula
      &hide_border=true|1
      &show_owner=false
      &cache_seconds=1800
"""
from http.server import BaseHTTPRequestHandler
from urllib.parse import urlparse, parse_qs
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.append(str(PROJECT_ROOT))

from core.github_client import build_headers
from core.pin_service import handle_pin_request


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        query = parse_qs(urlparse(self.path).query)
        resp = handle_pin_request(query, build_headers())

        self.send_response(resp.status)
        for name, value in resp.headers.items():
            self.send_header(name, value)
        self.end_headers()
        self.wfile.write(resp.body.encode("utf-8"))
