#!/usr/bin/env python3
"""
Wheel of Life Web Interface

Flask app exposing the live wheel, insights, chart and snapshot history.
"""

import logging

from flask import Flask
from rich.logging import RichHandler

from config import LOG_LEVEL, WEB_PORT, WEB_URL
from routes import wheel_bp
from lifewheel import WheelSession


def setup_logging(level: str = LOG_LEVEL):
    """Route all log output through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def create_app(session: WheelSession = None) -> Flask:
    """Build the app around one WheelSession (a fresh one if not given)."""
    app = Flask(__name__)
    app.extensions["wheel_session"] = session or WheelSession()
    app.register_blueprint(wheel_bp)
    return app


if __name__ == "__main__":
    setup_logging()
    app = create_app()
    print("\n" + "="*60)
    print("  Wheel of Life Web Interface")
    print("="*60)
    print(f"  Open {WEB_URL} in your browser")
    print("="*60 + "\n")
    app.run(debug=True, port=WEB_PORT)
