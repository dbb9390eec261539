from __future__ import annotations

from datetime import date

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import format_iso_date, parse_iso_date, today_local
from ..container import Container
from ..core.constants import ATTENDANCE_THRESHOLD_PERCENT
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _selected_date(value: str | None) -> date:
        if not value:
            return today_local()
        try:
            return parse_iso_date(value)
        except ValueError:
            flash(f"Invalid date {value!r}, showing today instead", "warning")
            return today_local()

    def _back_to(date_value: str | None):
        try:
            target = format_iso_date(parse_iso_date(date_value)) if date_value else None
        except ValueError:
            target = None
        if target:
            return redirect(url_for("index", date=target))
        return redirect(url_for("index"))

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        selected = _selected_date(request.args.get("date"))
        record = container.attendance_service.load()
        data = container.attendance_service.get_dashboard(record, selected)
        return render_template("attendance.html", data=data, threshold=ATTENDANCE_THRESHOLD_PERCENT)

    @app.route("/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        date_value = request.form.get("date")
        try:
            container.attendance_service.mark(
                request.form.get("subject") or "",
                date_value or "",
                request.form.get("status") or "",
            )
        except ValidationError as e:
            flash(str(e), "warning")
        return _back_to(date_value)

    @app.route("/attendance/remove", methods=["POST"], endpoint="remove_attendance")
    def remove_attendance():
        date_value = request.form.get("date")
        try:
            container.attendance_service.remove(request.form.get("subject") or "", date_value or "")
        except ValidationError as e:
            flash(str(e), "warning")
        return _back_to(date_value)
