from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import MySQLConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, parse_row_id
from .model import EmployeeFields, EmployeeRecord
from .repository import EmployeeRecordRepository

_COLUMNS = EmployeeFields.field_names()
_SELECT = "SELECT record_id, name, position, department, salary FROM employee_records"


def _to_record(row: Dict[str, Any]) -> EmployeeRecord:
    salary = row.get("salary")
    if isinstance(salary, float) and salary.is_integer():
        salary = int(salary)
    return EmployeeRecord(
        record_id=str(row["record_id"]),
        name=row.get("name"),
        position=row.get("position"),
        department=row.get("department"),
        salary=salary,
    )


class MySQLEmployeeRecordRepository(EmployeeRecordRepository):
    def __init__(self, conn_factory: MySQLConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[EmployeeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY record_id ASC")
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: str) -> Optional[EmployeeRecord]:
        row_id = parse_row_id(record_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE record_id=%s", (row_id,))
            row = fetchone(cur)
            return _to_record(row) if row else None

    def create(self, fields: EmployeeFields) -> EmployeeRecord:
        values = [getattr(fields, c) for c in _COLUMNS]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_records(name, position, department, salary)
                VALUES(%s,%s,%s,%s)
                """,
                tuple(values),
            )
            return EmployeeRecord.from_fields(str(cur.lastrowid), fields)

    def update_by_id(self, record_id: str, fields: EmployeeFields) -> Optional[EmployeeRecord]:
        row_id = parse_row_id(record_id)
        changes = fields.provided()
        with db_cursor(self._conn_factory) as (_, cur):
            # rowcount is 0 for unchanged rows too, so existence is checked separately.
            cur.execute("SELECT record_id FROM employee_records WHERE record_id=%s", (row_id,))
            if not fetchone(cur):
                return None
            if changes:
                assignments = ", ".join(f"{c}=%s" for c in changes)
                cur.execute(
                    f"UPDATE employee_records SET {assignments} WHERE record_id=%s",
                    (*changes.values(), row_id),
                )
            cur.execute(f"{_SELECT} WHERE record_id=%s", (row_id,))
            return _to_record(fetchone(cur))

    def delete_by_id(self, record_id: str) -> bool:
        row_id = parse_row_id(record_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employee_records WHERE record_id=%s", (row_id,))
            return cur.rowcount > 0
