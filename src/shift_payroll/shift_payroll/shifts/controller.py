from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_error
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:employee_id>/shifts", methods=["GET"], endpoint="shifts_list")
    def shifts_list(employee_id: int):
        period = request.args.get("period") or None
        try:
            rows = container.payroll_report_service.shift_history(employee_id, period_key=period)
        except DomainError as e:
            return json_error(e)
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/employees/<int:employee_id>/shifts", methods=["POST"], endpoint="shifts_create")
    def shifts_create(employee_id: int):
        payload = request.get_json(silent=True) or {}
        try:
            shift_id = container.shift_service.add(
                employee_id=employee_id,
                work_date=payload.get("date", ""),
                start=payload.get("start_time", ""),
                end=payload.get("end_time") or None,
                break_minutes=payload.get("break_minutes", 0),
            )
        except DomainError as e:
            return json_error(e)
        return jsonify({"shift_id": shift_id}), 201

    @app.route("/api/shifts/<int:shift_id>", methods=["PUT"], endpoint="shifts_update")
    def shifts_update(shift_id: int):
        payload = request.get_json(silent=True) or {}
        try:
            container.shift_service.update(
                shift_id=shift_id,
                work_date=payload.get("date", ""),
                start=payload.get("start_time", ""),
                end=payload.get("end_time") or None,
                break_minutes=payload.get("break_minutes", 0),
            )
        except DomainError as e:
            return json_error(e)
        return jsonify({"shift_id": shift_id})

    @app.route("/api/shifts/<int:shift_id>", methods=["DELETE"], endpoint="shifts_delete")
    def shifts_delete(shift_id: int):
        try:
            container.shift_service.delete(shift_id=shift_id)
        except DomainError as e:
            return json_error(e)
        return "", 204
