#!/usr/bin/env python3
"""
Local development server for the /api/pin function.

    python scripts/serve.py --port 8000
    open http://localhost:8000/api/pin?username=octocat&repo=Hello-World
"""
import argparse
import logging
import sys
from http.server import ThreadingHTTPServer
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.append(str(PROJECT_ROOT))

from api.pin import handler as PinHandler

logger = logging.getLogger("serve")


class DevHandler(PinHandler):
    def do_GET(self):
        if not self.path.startswith("/api/pin"):
            self.send_error(404, "Only /api/pin is served")
            return
        super().do_GET()


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve /api/pin locally.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    server = ThreadingHTTPServer((args.host, args.port), DevHandler)
    logger.info("Serving http://%s:%s/api/pin", args.host, args.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
