from flask import Blueprint, request, jsonify, make_response

from church_records.exceptions import ValidationError
from church_records.services import (
    ChurchService,
    ChurchMemberService,
    FundsTypeService,
    ChurchMemberFundsService,
)


def _json_body():
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return None
    return data


def make_crud_blueprint(name, url_prefix, service, filters=()):
    """Blueprint exposing one service's create/read/update/delete/count."""
    bp = Blueprint(name, __name__, url_prefix=url_prefix)

    def _filters():
        values, errors = {}, {}
        for key in filters:
            raw = request.args.get(key)
            if raw is None:
                continue
            try:
                values[key] = int(raw)
            except ValueError:
                errors[key] = "Must be an integer"
        if errors:
            raise ValidationError(errors, "Invalid filter")
        return values

    @bp.route("", methods=["GET"])
    def list_records():
        records = service.list(**_filters())
        return jsonify([record.to_dict() for record in records])

    @bp.route("/count", methods=["GET"])
    def count_records():
        return jsonify({"count": service.count(**_filters())})

    @bp.route("", methods=["POST"])
    def create_record():
        data = _json_body()
        if data is None:
            return jsonify({"error": "No data provided"}), 400
        record = service.create(data)
        return make_response(jsonify(record.to_dict()), 201)

    @bp.route("/<int:record_id>", methods=["GET"])
    def get_record(record_id):
        return jsonify(service.get_by_id(record_id).to_dict())

    @bp.route("/<int:record_id>", methods=["PUT"])
    def update_record(record_id):
        data = _json_body()
        if data is None:
            return jsonify({"error": "No data provided"}), 400
        return jsonify(service.update(record_id, data).to_dict())

    @bp.route("/<int:record_id>", methods=["DELETE"])
    def delete_record(record_id):
        service.delete(record_id)
        return jsonify({"message": f"{service.label} deleted successfully"})

    return bp


church_bp = make_crud_blueprint("church", "/api/churches", ChurchService)
member_bp = make_crud_blueprint(
    "member", "/api/members", ChurchMemberService, filters=("church_id",)
)
fund_type_bp = make_crud_blueprint("fund_type", "/api/fund-types", FundsTypeService)
fund_bp = make_crud_blueprint(
    "fund",
    "/api/funds",
    ChurchMemberFundsService,
    filters=("member_id", "fund_type_id"),
)
