"""
Pydantic models for student records and registration requests.

A student record is exactly one row of the registration sheet.  The
registration request carries the same five fields plus the
verification token; every field is optional at the schema level so
that the workflow, not pydantic, decides how a missing field is
reported.
"""

from typing import List, Optional, Sequence

from pydantic import BaseModel, Field


STUDENT_FIELDS = ("name", "email", "phone", "school", "group")


class Student(BaseModel):
    """A registered student as stored in the sheet."""

    name: str = ""
    email: str = ""
    phone: str = ""
    school: str = ""
    group: str = ""

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Student":
        """Build a record from a sheet row; missing cells become ``""``."""
        cells = [str(value) if value is not None else "" for value in row]
        cells += [""] * (len(STUDENT_FIELDS) - len(cells))
        return cls(**dict(zip(STUDENT_FIELDS, cells)))

    def to_row(self) -> List[str]:
        return [self.name, self.email, self.phone, self.school, self.group]


class RegistrationRequest(BaseModel):
    """Body of ``POST /api/register``."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    school: Optional[str] = None
    group: Optional[str] = None
    verification_token: Optional[str] = Field(default=None, alias="verificationToken")

    model_config = {
        "populate_by_name": True,
    }

    def to_student(self) -> Student:
        return Student(
            name=self.name or "",
            email=self.email or "",
            phone=self.phone or "",
            school=self.school or "",
            group=self.group or "",
        )


class StudentsResponse(BaseModel):
    success: bool = True
    students: List[Student]


class RegistrationResponse(BaseModel):
    success: bool = True
    message: str
