"""Flask blueprint exposing the watchlist."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from .service import REMOVE_PROMPT, EntryNotFoundError, ValidationError, WatchlistService

bp = Blueprint("watchlist", __name__, url_prefix="/api/watchlist")


def _service() -> WatchlistService:
    return current_app.extensions["watchlist_service"]


def _notice():
    board = current_app.extensions.get("watchlist_alerts")
    notice = board.latest() if board else None
    return notice.to_dict() if notice else None


def _snapshot(service: WatchlistService) -> dict:
    return {
        "success": True,
        "watchlist": service.view_model().to_dict(),
        "stats": service.counts().to_dict(),
        "notice": _notice(),
    }


@bp.errorhandler(ValidationError)
def handle_validation_error(error: ValidationError):
    return jsonify({
        "success": False,
        "error": error.kind.value,
        "field": error.field,
        "message": str(error),
    }), 400


@bp.errorhandler(EntryNotFoundError)
def handle_not_found(error: EntryNotFoundError):
    return jsonify({"success": False, "message": str(error)}), 404


@bp.get("")
def get_watchlist():
    return jsonify(_snapshot(_service()))


@bp.get("/stats")
def get_stats():
    return jsonify({"success": True, "stats": _service().counts().to_dict()})


@bp.post("")
def submit_entry():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    service = _service()
    entry = service.submit(payload)
    data = _snapshot(service)
    data["entry"] = entry.to_dict()
    return jsonify(data)


@bp.post("/<int:index>/edit")
def begin_edit(index: int):
    service = _service()
    entry = service.begin_edit(index)
    data = _snapshot(service)
    data["entry"] = entry.to_dict()
    return jsonify(data)


@bp.delete("/edit")
def cancel_edit():
    service = _service()
    service.cancel_edit()
    return jsonify(_snapshot(service))


@bp.delete("/<int:index>")
def remove_entry(index: int):
    confirmed = request.args.get("confirm", "").lower() in ("1", "true", "yes")
    service = _service()
    removed = service.remove(index, confirm=lambda message: confirmed)
    if removed is None:
        return jsonify({"success": False, "confirm": REMOVE_PROMPT}), 409
    data = _snapshot(service)
    data["removed"] = removed.to_dict()
    return jsonify(data)
