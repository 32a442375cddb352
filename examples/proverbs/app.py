"""Proverbs — a plain handler at the root, static files under a sub-path.

``/`` (and anything no other route claims) answers ``200``.
``/proverbs/<file>`` serves ``<file>`` from the shared ``static``
directory; the handler only ever sees the part after ``/proverbs/``.

Run:
    python app.py
"""

import logging
from pathlib import Path

from switchyard import App, AppConfig, Request, Response, StaticFiles

STATIC_DIR = Path(__file__).parent.parent / "static"

app = App(AppConfig(port=9000))


@app.route("/")
def index(request: Request) -> Response:
    return Response(status=200)


app.mount("/proverbs/", StaticFiles(STATIC_DIR))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run()
