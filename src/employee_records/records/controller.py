from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for
from flask_login import login_required

from ..container import Container
from ..views import render_view
from .model import EmployeeFields


def register(app: Flask, container: Container) -> None:
    records = container.record_service

    @app.route("/employee_records", endpoint="records_list")
    def records_list():
        return render_view("records/list", title="Employee Records", records=records.list_all())

    @app.route("/employee_records/create", methods=["GET"], endpoint="records_create_form")
    @login_required
    def records_create_form():
        return render_view("records/create", title="Add Employee", record=EmployeeFields())

    @app.route("/employee_records/create", methods=["POST"], endpoint="records_create")
    @login_required
    def records_create():
        record = records.create(EmployeeFields.from_form(request.form))
        flash(f"Employee record {record.name or record.record_id} created.", "success")
        return redirect(url_for("records_list"))

    @app.route("/employee_records/<record_id>/edit", endpoint="records_edit_form")
    @login_required
    def records_edit_form(record_id: str):
        record = records.get_by_id(record_id)
        return render_view("records/edit", title="Edit Employee", record=record)

    @app.route("/employee_records/<record_id>/update", methods=["POST"], endpoint="records_update")
    @login_required
    def records_update(record_id: str):
        record = records.update_by_id(record_id, EmployeeFields.from_form(request.form))
        flash(f"Employee record {record.name or record.record_id} updated.", "success")
        return redirect(url_for("records_list"))

    @app.route("/employee_records/delete", endpoint="records_delete_form")
    @login_required
    def records_delete_form():
        return render_view("records/delete", title="Delete Employee", records=records.list_all())

    @app.route("/employee_records/delete/<record_id>", methods=["POST"], endpoint="records_delete")
    @login_required
    def records_delete(record_id: str):
        records.delete_by_id(record_id)
        flash("Employee record deleted.", "success")
        return redirect(url_for("records_list"))
