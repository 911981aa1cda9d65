from __future__ import annotations

import uuid

import pytest

from employee_records import create_app
from employee_records.records.model import EmployeeFields
from employee_records.views import VIEWS

ADA = {"name": "Ada", "position": "Engineer", "department": "R&D", "salary": "90000"}


def _login(client, password="secret123"):
    return client.post("/login", data={"username": "alice", "password": password})


def test_list_is_public_and_empty_at_first(client):
    resp = client.get("/employee_records")

    assert resp.status_code == 200
    assert b"No employee records yet." in resp.data


def test_home_page_renders(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"Employee Records" in resp.data


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/employee_records/create"),
        ("post", "/employee_records/create"),
        ("get", "/employee_records/delete"),
        ("post", f"/employee_records/delete/{uuid.uuid4().hex}"),
    ],
)
def test_protected_routes_redirect_to_login(client, method, path):
    resp = getattr(client, method)(path)

    assert resp.status_code == 302
    assert "/login" in resp.headers["Location"]


def test_create_redirects_to_list_showing_the_new_record(logged_in, records_repo):
    resp = logged_in.post("/employee_records/create", data=ADA)

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/employee_records")

    page = logged_in.get("/employee_records")
    assert b"Ada" in page.data
    assert b"Engineer" in page.data
    [record] = records_repo.list_all()
    assert record.salary == 90000


def test_flash_message_is_shown_exactly_once(logged_in):
    logged_in.get("/employee_records")  # consumes the login greeting
    logged_in.post("/employee_records/create", data=ADA)

    first = logged_in.get("/employee_records")
    second = logged_in.get("/employee_records")

    assert first.data.count(b"Employee record Ada created.") == 1
    assert b"Employee record Ada created." not in second.data


def test_edit_form_is_prefilled(logged_in, records_repo):
    record = records_repo.create(EmployeeFields(name="Ada", position="Engineer"))

    resp = logged_in.get(f"/employee_records/{record.record_id}/edit")

    assert resp.status_code == 200
    assert b'value="Ada"' in resp.data
    assert f"/employee_records/{record.record_id}/update".encode() in resp.data


def test_edit_unknown_id_renders_404_error_page(logged_in):
    resp = logged_in.get(f"/employee_records/{uuid.uuid4().hex}/edit")

    assert resp.status_code == 404
    assert b"not found" in resp.data
    assert b"Error 404" in resp.data


def test_edit_malformed_id_is_400(logged_in):
    resp = logged_in.get("/employee_records/not-an-id/edit")

    assert resp.status_code == 400
    assert b"Invalid record id" in resp.data


def test_update_changes_only_submitted_fields(logged_in, records_repo):
    record = records_repo.create(EmployeeFields(name="Ada", position="Engineer", department="R&D", salary=90000))

    resp = logged_in.post(f"/employee_records/{record.record_id}/update", data={"salary": "95000"})

    assert resp.status_code == 302
    updated = records_repo.get_by_id(record.record_id)
    assert updated.salary == 95000
    assert (updated.name, updated.position, updated.department) == ("Ada", "Engineer", "R&D")


def test_update_unknown_id_is_404(logged_in):
    resp = logged_in.post(f"/employee_records/{uuid.uuid4().hex}/update", data={"salary": "1"})

    assert resp.status_code == 404


def test_update_with_non_numeric_salary_is_400(logged_in, records_repo):
    record = records_repo.create(EmployeeFields(name="Ada"))

    resp = logged_in.post(f"/employee_records/{record.record_id}/update", data={"salary": "lots"})

    assert resp.status_code == 400
    assert records_repo.get_by_id(record.record_id).salary is None


def test_delete_selection_lists_records(logged_in, records_repo):
    record = records_repo.create(EmployeeFields(name="Ada"))

    resp = logged_in.get("/employee_records/delete")

    assert resp.status_code == 200
    assert f"/employee_records/delete/{record.record_id}".encode() in resp.data


def test_delete_then_delete_again_is_404(logged_in, records_repo):
    record = records_repo.create(EmployeeFields(name="Ada"))

    first = logged_in.post(f"/employee_records/delete/{record.record_id}")
    second = logged_in.post(f"/employee_records/delete/{record.record_id}")

    assert first.status_code == 302
    assert records_repo.list_all() == []
    assert second.status_code == 404


def test_wrong_password_three_times_gives_same_generic_message(client, account):
    for _ in range(3):
        resp = _login(client, password="wrong")
        assert resp.status_code == 302
        assert "/login" in resp.headers["Location"]

        page = client.get("/login")
        assert page.data.count(b"Invalid username or password.") == 1

    # no lockout
    resp = _login(client)
    assert resp.headers["Location"].endswith("/employee_records")


def test_unknown_username_gets_the_same_message(client, account):
    _login(client, password="wrong")
    wrong_password = client.get("/login").data

    client.post("/login", data={"username": "mallory", "password": "secret123"})
    unknown_user = client.get("/login").data

    assert b"Invalid username or password." in wrong_password
    assert b"Invalid username or password." in unknown_user


def test_login_follows_relative_next_only(client, account):
    resp = client.post("/login?next=/employee_records/create", data={"username": "alice", "password": "secret123"})
    assert resp.headers["Location"].endswith("/employee_records/create")

    client.get("/logout")
    resp = client.post("/login?next=//evil.example", data={"username": "alice", "password": "secret123"})
    assert resp.headers["Location"].endswith("/employee_records")


def test_logout_makes_the_old_cookie_inert(logged_in):
    old_cookie = logged_in.get_cookie("session").value
    assert logged_in.get("/employee_records/create").status_code == 200

    resp = logged_in.get("/logout")
    assert resp.status_code == 302

    logged_in.set_cookie("session", old_cookie)
    resp = logged_in.get("/employee_records/create")
    assert resp.status_code == 302
    assert "/login" in resp.headers["Location"]


def test_store_unavailable_renders_500_page(client, records_repo):
    records_repo.unavailable = True

    resp = client.get("/employee_records")

    assert resp.status_code == 500
    assert b"unavailable" in resp.data
    assert b"Traceback" in resp.data


def test_error_detail_hidden_in_production(monkeypatch, container, records_repo):
    monkeypatch.setenv("APP_ENV", "production")
    client = create_app(container=container).test_client()
    records_repo.unavailable = True

    resp = client.get("/employee_records")

    assert resp.status_code == 500
    assert b"unavailable" in resp.data
    assert b"Traceback" not in resp.data


def test_unknown_path_renders_error_page(client):
    resp = client.get("/no/such/page")

    assert resp.status_code == 404
    assert b"Error 404" in resp.data


def test_template_missing_at_request_time_is_500(client, monkeypatch):
    monkeypatch.setitem(VIEWS, "records/list", "employee_records/missing.html")

    resp = client.get("/employee_records")

    assert resp.status_code == 500
    assert b"Something went wrong" in resp.data


def test_create_with_oversized_salary_is_400(logged_in, records_repo):
    resp = logged_in.post("/employee_records/create", data={**ADA, "salary": "100000000000000000000"})

    assert resp.status_code == 400
    assert b"Salary is too large" in resp.data
    assert records_repo.list_all() == []
