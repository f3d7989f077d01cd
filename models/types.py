# models/types.py

"""
Holds TypeVar definition for simplifying type checks.
"""

from typing import TypeVar

from .attendance_record import AttendanceRecord
from .session import Session
from .student import Student

RecordType = TypeVar("RecordType", Student, Session, AttendanceRecord)
