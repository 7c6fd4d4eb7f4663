"""
Absence Messages
----------------
Description: Builds absence notices sent to the guardians of students
Authors: Secretaria Escolar
Date Created: 2024-05-10
"""

from .code import (
    AbsenceNotice,
    ClassType,
    build_absence_message,
    build_integral_message,
    build_regular_message,
    describe_shift,
)
from .config import MessageSettings

__all__ = [
    'AbsenceNotice',
    'ClassType',
    'MessageSettings',
    'build_absence_message',
    'build_integral_message',
    'build_regular_message',
    'describe_shift',
]
