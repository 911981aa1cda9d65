from __future__ import annotations

from dataclasses import dataclass, fields as dataclass_fields
from typing import Any, Dict, Mapping, Optional, Union

from ..common.validators import optional_number, optional_text

Number = Union[int, float]


@dataclass(frozen=True)
class EmployeeFields:
    """The submitted field set of an employee record.

    ``None`` means "not provided": create leaves the field out of the stored
    record and update leaves the stored value untouched.
    """

    name: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[Number] = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclass_fields(cls))

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "EmployeeFields":
        # Keys other than the declared fields (csrf tokens, submit buttons, ...) are ignored.
        return cls(
            name=optional_text(form.get("name")),
            position=optional_text(form.get("position")),
            department=optional_text(form.get("department")),
            salary=optional_number(form.get("salary"), "Salary"),
        )

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "EmployeeFields":
        return cls(**{name: doc.get(name) for name in cls.field_names()})

    def provided(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.field_names() if getattr(self, name) is not None}


@dataclass(frozen=True)
class EmployeeRecord:
    """A stored employee record. ``record_id`` is assigned by the store."""

    record_id: str
    name: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[Number] = None

    @classmethod
    def from_fields(cls, record_id: str, fields: EmployeeFields) -> "EmployeeRecord":
        return cls(record_id=record_id, **fields.provided())

    def as_fields(self) -> EmployeeFields:
        return EmployeeFields(name=self.name, position=self.position, department=self.department, salary=self.salary)
