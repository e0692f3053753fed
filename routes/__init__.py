"""
Flask blueprints for the Wheel of Life API.
"""

from flask import Blueprint, current_app

# Create blueprints
wheel_bp = Blueprint('wheel', __name__)


def get_session():
    """The WheelSession attached to the running app."""
    return current_app.extensions["wheel_session"]


# Import routes to register them
from . import wheel
