"""Ownership rules shared by every resource.

Role gates in ``auth_utils`` decide *who* may call a route; the helpers here
decide whether the caller may touch a particular record. Admins pass every
check. Patients and doctors are matched against the ``patient_id`` /
``doctor_id`` columns of the record.
"""
from fastapi import HTTPException, status

from model.user_model import Users


def _deny(action: str, resource: str):
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=f"Not authorized to {action} this {resource}",
    )


def is_participant(user: Users, record) -> bool:
    if user.role == "admin":
        return True
    if user.role == "patient":
        return record.patient_id == user.id
    if user.role == "doctor":
        return record.doctor_id == user.id
    return False


def ensure_participant(user: Users, record, action: str = "access", resource: str = "appointment"):
    if not is_participant(user, record):
        _deny(action, resource)


def ensure_self_or_admin(user: Users, user_id: int, action: str = "access", resource: str = "user"):
    if user.role != "admin" and user.id != user_id:
        _deny(action, resource)


def ensure_patient_scope(user: Users, patient_id: int):
    """Patients read only their own records; doctors and admins read any."""
    if user.role == "patient" and user.id != patient_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
