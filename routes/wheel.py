"""
Wheel API routes.

Thin JSON layer over WheelSession: validates request bodies, enforces the
minimum-area floor for removals, and serializes results.
"""

import json
import math

from flask import Response, jsonify, request
from config import MIN_CATEGORIES
from . import wheel_bp, get_session


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@wheel_bp.route("/")
def index():
    """Health/index."""
    session = get_session()
    return jsonify({
        "status": "ok",
        "areas": len(session.categories),
        "snapshots": len(session.list_snapshots()),
    })


@wheel_bp.route("/api/state")
def get_state():
    """Everything the UI needs in one payload."""
    return jsonify(get_session().state())


# === Categories ===

@wheel_bp.route("/api/categories")
def list_categories():
    return jsonify(get_session().state()["categories"])


@wheel_bp.route("/api/categories", methods=["POST"])
def add_category():
    """Add an area. Blank or duplicate labels are a no-op, not an error."""
    data = _json_body()
    label = data.get("label", "")
    if not isinstance(label, str):
        return jsonify({"error": "label must be a string"}), 400

    category = get_session().add_category(label, data.get("description") or "")
    if category is None:
        return jsonify({"added": False})
    return jsonify({"added": True, "category": category.model_dump()}), 201


@wheel_bp.route("/api/categories/<category_id>", methods=["DELETE"])
def remove_category(category_id):
    session = get_session()
    if session.registry.get(category_id) is None:
        return jsonify({"removed": False})
    if not session.can_remove_category():
        return jsonify({"error": f"At least {MIN_CATEGORIES} areas are required"}), 409

    category = session.remove_category(category_id)
    return jsonify({"removed": True, "category": category.model_dump()})


# === Scores ===

@wheel_bp.route("/api/scores/<path:label>", methods=["PUT"])
def set_score(label):
    """Set a score; out-of-range values (including Infinity) are clamped to 0-10."""
    value = _json_body().get("value")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return jsonify({"error": "value must be a number"}), 400
    if isinstance(value, float) and math.isnan(value):
        return jsonify({"error": "value must be a number"}), 400

    session = get_session()
    if not session.set_score(label, value):
        return jsonify({"error": "Unknown area"}), 404
    return jsonify({"label": label, "score": session.scores.get(label)})


# === Derived views ===

@wheel_bp.route("/api/insights")
def get_insights():
    return jsonify(get_session().insights().model_dump())


@wheel_bp.route("/api/chart")
def get_chart():
    """Dataset plus the Plotly figure JSON for client-side rendering."""
    session = get_session()
    figure = session.render_chart(user_name=request.args.get("name"))
    return jsonify({
        "dataset": session.chart_dataset().model_dump(),
        "figure": json.loads(figure.to_json()),
    })


@wheel_bp.route("/api/chart.png")
def download_chart():
    """PNG of the chart. 204 when the image engine is unavailable."""
    session = get_session()
    session.render_chart(user_name=request.args.get("name"))
    image = session.export_chart("png")
    if image is None:
        return Response(status=204)
    return Response(
        image,
        mimetype="image/png",
        headers={"Content-Disposition": "attachment; filename=wheel-of-life.png"},
    )


# === Snapshots ===

@wheel_bp.route("/api/snapshots")
def list_snapshots():
    session = get_session()
    return jsonify({
        "snapshots": [s.to_record() for s in session.list_snapshots()],
        "active_comparison_id": session.snapshots.active_comparison_id,
    })


@wheel_bp.route("/api/snapshots", methods=["POST"])
def save_snapshot():
    name = _json_body().get("name")
    if name is not None and not isinstance(name, str):
        return jsonify({"error": "name must be a string"}), 400

    session = get_session()
    snapshot = session.save_snapshot(name)
    return jsonify({
        "snapshot": snapshot.to_record(),
        "persisted": session.snapshots.last_save_ok,
    }), 201


@wheel_bp.route("/api/snapshots/<snapshot_id>/compare", methods=["POST"])
def toggle_comparison(snapshot_id):
    session = get_session()
    if session.snapshots.get(snapshot_id) is None:
        return jsonify({"error": "Not found"}), 404
    return jsonify({"active_comparison_id": session.select_for_comparison(snapshot_id)})


@wheel_bp.route("/api/comparison", methods=["DELETE"])
def clear_comparison():
    get_session().clear_comparison()
    return jsonify({"active_comparison_id": None})
