"""File server — serve the shared ``static`` directory at the site root.

Run:
    python app.py
"""

import logging
from pathlib import Path

from switchyard import App, AppConfig

STATIC_DIR = Path(__file__).parent.parent / "static"

app = App(AppConfig(port=9000, static_dir=STATIC_DIR, static_prefix="/"))
app.mount_static()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run()
