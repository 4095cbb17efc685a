"""Pydantic request/response schemas for the Student resource.

Schemas keep the wire shape stable (camelCase field names) while the
Python attributes stay snake_case. Validation is limited to presence,
type and enumeration membership; there are no derived fields.
"""

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# An empty string counts as missing for required fields.
RequiredStr = Annotated[str, StringConstraints(min_length=1)]


class Gender(str, Enum):
    male = "male"
    female = "female"


class BloodGroup(str, Enum):
    a_positive = "A+"
    a_negative = "A-"
    b_positive = "B+"
    b_negative = "B-"
    ab_positive = "AB+"
    ab_negative = "AB-"
    o_positive = "O+"
    o_negative = "O-"


class ActiveStatus(str, Enum):
    active = "active"
    blocked = "blocked"


class DocumentModel(BaseModel):
    """Base for every Student (sub-)document: camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class UserName(DocumentModel):
    first_name: RequiredStr
    middle_name: Optional[str] = None
    last_name: RequiredStr


class Guardian(DocumentModel):
    """Parents' details; every field is required."""
    father_name: RequiredStr
    father_occupation: RequiredStr
    father_contact_no: RequiredStr
    mother_name: RequiredStr
    mother_occupation: RequiredStr
    mother_contact_no: RequiredStr
    address: RequiredStr


class LocalGuardian(DocumentModel):
    name: RequiredStr
    occupation: RequiredStr
    contact_no: RequiredStr
    address: RequiredStr


class Address(DocumentModel):
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class StudentIn(DocumentModel):
    """Payload accepted by the create operation."""
    name: UserName
    gender: Gender
    blood_group: Optional[BloodGroup] = None
    email: RequiredStr
    phone: RequiredStr
    address: Optional[Address] = None
    department: RequiredStr
    academic_semester: RequiredStr
    guardian: Guardian
    local_guardian: LocalGuardian
    profile_image: Optional[str] = None
    is_active: ActiveStatus


class StudentOut(StudentIn):
    """A stored Student including its store-assigned identity."""
    id: str
