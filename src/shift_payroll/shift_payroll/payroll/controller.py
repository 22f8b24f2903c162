from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_error
from ..core.exceptions import DomainError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:employee_id>/payroll/periods", methods=["GET"], endpoint="payroll_periods")
    def payroll_periods(employee_id: int):
        try:
            summaries = container.payroll_report_service.monthly_summaries(employee_id)
        except DomainError as e:
            return json_error(e)
        return jsonify([s.to_dict() for s in summaries])

    @app.route("/api/employees/<int:employee_id>/payroll/yearly", methods=["GET"], endpoint="payroll_yearly")
    def payroll_yearly(employee_id: int):
        year_s = request.args.get("year")
        try:
            if year_s and not year_s.isdigit():
                raise ValidationError(f"Invalid year: {year_s!r}")
            progress = container.payroll_report_service.yearly_progress(
                employee_id, year=int(year_s) if year_s else None
            )
        except DomainError as e:
            return json_error(e)
        return jsonify(progress.to_dict())

    @app.route(
        "/api/employees/<int:employee_id>/payroll/payslips/<period>",
        methods=["GET"],
        endpoint="payroll_payslip",
    )
    def payroll_payslip(employee_id: int, period: str):
        try:
            payslip = container.payroll_report_service.payslip(employee_id, period)
        except DomainError as e:
            return json_error(e)
        return jsonify(payslip.to_dict())
