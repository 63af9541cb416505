"""Gunicorn entry point (see ``wsgi_app`` in gunicorn.conf.py)."""

import os
import logging
from app import create_app

app = create_app()
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))

    logger.info(f"Serving notifications API on port {port}")
    app.run(host="0.0.0.0", port=port)
