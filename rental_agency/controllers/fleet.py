from flask import Blueprint, Response, jsonify, request
from werkzeug.exceptions import BadRequest

from ..services.fleet_service import FleetService

bp = Blueprint("fleet", __name__, url_prefix="/fleet")


def _text(body: str) -> Response:
    return Response(body, mimetype="text/plain")


@bp.get("/")
def fleet_summary():
    """Agency name, vehicle count and every vehicle in fleet order."""
    return jsonify(FleetService.summary())


@bp.get("/text")
def fleet_text():
    return _text(FleetService.fleet_text())


@bp.get("/cars/report")
def cars_report():
    """Plain-text report of every car and its cost for ?days=N."""
    return _text(FleetService.cars_report(request.args.get("days")))


@bp.get("/cars")
def cars_sorted():
    return jsonify(FleetService.cars_sorted_by_plate())


@bp.get("/vans")
def vans_sorted():
    return jsonify(FleetService.vans_sorted_by_volume())


@bp.get("/brands")
def brands():
    return jsonify(FleetService.brands_with_models())


@bp.get("/vehicles/<plate>/cost")
def vehicle_cost(plate):
    return jsonify(FleetService.rental_cost(plate, request.args.get("days")))


@bp.post("/vehicles")
def add_vehicle():
    """Add one vehicle from a record line sent as JSON {"line": ...} or form field `line`."""
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.form
    elif not isinstance(payload, dict):
        raise BadRequest("Expected a JSON object with a 'line' field")
    line = payload.get("line")
    if not isinstance(line, str) or not line.strip():
        raise BadRequest("Missing record line")
    line = line.strip()
    ok, msg = FleetService.add_line(line)
    return jsonify(ok=ok, message=msg), (201 if ok else 200)


@bp.post("/load")
def load_lines():
    """Load a batch of record lines sent as JSON {"lines": [...]}."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise BadRequest("Expected a JSON object with a 'lines' field")
    lines = payload.get("lines")
    if not isinstance(lines, list) or not all(isinstance(s, str) for s in lines):
        raise BadRequest("Expected a JSON list of strings under 'lines'")
    return jsonify(FleetService.load_lines(lines))
