from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..auth.controller import admin_required
from ..common.datetime_utils import resolve_period
from ..container import Container
from ..core.constants import DATE_FORMAT
from .model import RECORD_FIELDS, PayrollReport


def register(app: Flask, container: Container) -> None:
    def _report_from_request() -> tuple[PayrollReport, dict]:
        start, end = resolve_period(request.args.get("start"), request.args.get("end"), now=container.clock())
        active_only = request.args.get("active_only") in {"1", "true", "yes"}
        report = container.payroll_report_service.compute_report(start=start, end=end, active_only=active_only)
        period = {
            "start": start.strftime(DATE_FORMAT) if start else None,
            "end": end.strftime(DATE_FORMAT),
        }
        return report, period

    def _write_report_csv(*, report: PayrollReport, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=RECORD_FIELDS)
        writer.writeheader()
        for row in report.as_records():
            writer.writerow(row)

        return app.response_class(
            out.getvalue().encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/payroll", methods=["GET"], endpoint="payroll")
    @admin_required
    def payroll():
        report, period = _report_from_request()
        return jsonify({"success": True, **period, **report.as_dict()})

    @app.route("/payroll.csv", methods=["GET"], endpoint="payroll_csv")
    @admin_required
    def payroll_csv():
        report, _ = _report_from_request()
        return _write_report_csv(report=report, filename="payroll.csv")
