from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import isoformat_or_none
from ..common.responses import json_error
from ..core.exceptions import DomainError
from ..container import Container


def _wage_to_dict(w):
    if w is None:
        return None
    return {
        "wage_id": w.wage_id,
        "hourly_wage": w.hourly_wage,
        "transportation": w.transportation,
        "effective_from": isoformat_or_none(w.effective_from),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        out = []
        for e in container.employee_service.list_all():
            current = container.wage_service.current(e.employee_id)
            out.append(
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "email": e.email,
                    "hourly_wage": current.hourly_wage if current else None,
                }
            )
        return jsonify(out)

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        payload = request.get_json(silent=True) or {}
        try:
            employee_id = container.employee_service.register(
                name=payload.get("name", ""),
                email=payload.get("email", ""),
                hourly_wage=payload.get("hourly_wage"),
                transportation=payload.get("transportation", 0),
            )
        except DomainError as e:
            return json_error(e)
        return jsonify({"employee_id": employee_id}), 201

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_detail")
    def employees_detail(employee_id: int):
        try:
            employee = container.employee_service.get(employee_id)
            current = container.wage_service.current(employee_id)
            yearly = container.payroll_report_service.yearly_progress(employee_id)
        except DomainError as e:
            return json_error(e)
        return jsonify(
            {
                "employee_id": employee.employee_id,
                "name": employee.name,
                "email": employee.email,
                "current_wage": _wage_to_dict(current),
                "yearly": yearly.to_dict(),
            }
        )

    @app.route("/api/employees/<int:employee_id>/wages", methods=["GET"], endpoint="wages_list")
    def wages_list(employee_id: int):
        try:
            history = container.wage_service.history(employee_id)
        except DomainError as e:
            return json_error(e)
        ordered = sorted(history, key=lambda w: w.effective_from, reverse=True)
        return jsonify([_wage_to_dict(w) for w in ordered])

    @app.route("/api/employees/<int:employee_id>/wages", methods=["POST"], endpoint="wages_revise")
    def wages_revise(employee_id: int):
        payload = request.get_json(silent=True) or {}
        try:
            wage_id = container.wage_service.revise(
                employee_id=employee_id,
                hourly_wage=payload.get("hourly_wage"),
                transportation=payload.get("transportation", 0),
                effective_date=payload.get("effective_from") or None,
            )
        except DomainError as e:
            return json_error(e)
        return jsonify({"wage_id": wage_id}), 201
