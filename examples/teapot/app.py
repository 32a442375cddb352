"""Teapot — log every request and refuse to brew coffee.

One prefix route at ``/`` catches every path. The router logs the
request line and the handler answers ``418 I'm a teapot``.

Run:
    python app.py
"""

import logging

from switchyard import App, AppConfig, StatusHandler

app = App(AppConfig(port=9000))
app.add("/", StatusHandler(418))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run()
