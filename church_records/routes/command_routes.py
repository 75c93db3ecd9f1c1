from flask import Blueprint, current_app, request, jsonify

from church_records.extensions import db
from church_records.migrations import SchemaManager
from church_records.services import greet

command_bp = Blueprint("command", __name__)


@command_bp.route("/greet", methods=["POST"])
def greet_name():
    data = request.get_json(silent=True)
    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name.strip():
        return jsonify({"error": "Name is required"}), 400
    return jsonify({"message": greet(name)})


@command_bp.route("/greet/<name>", methods=["GET"])
def greet_path(name):
    return jsonify({"message": greet(name)})


@command_bp.route("/schema", methods=["GET"])
def schema_status():
    current_app.logger.debug("Reading schema status")
    return jsonify(SchemaManager(db.engine).status())
