"""
Absence Messages
----------------
Description: Builds the chat messages sent to guardians when a student misses class.
Regular classes run a single shift; integral classes run both shifts and
record absences per shift, so their notice names the shift that was missed.
Authors: Secretaria Escolar
Date Created: 2024-05-10
Dependencies:
  - absence_messages.config
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import MessageSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = MessageSettings()

MORNING_KEYWORD = 'manhã'
AFTERNOON_KEYWORD = 'tarde'
BOTH_SHIFTS_KEYWORDS = ('integral', 'ambos', 'manhã e tarde')

REGULAR_TEMPLATE = (
    "Hello, family of *{full_name}* ! How are you?\n\n"
    "We noticed that *{first_name}* was not at school on *{absence_date}*. "
    "We would like to know if everything is alright.\n\n"
    "Please justify this absence using the form below:\n\n"
    "*Form Link*\n"
    "{form_url}\n\n"
    "*Why justify?*\n"
    "✓ Keeps attendance records up to date;\n"
    "✓ Preserves rights (such as social benefits);\n"
    "✓ Avoids further notices.\n\n"
    "*Reminder:*\n"
    "* Already justified? You can ignore this message.\n\n"
    "Thank you for your attention and partnership!\n"
    "*{institution_name} Team*"
)

INTEGRAL_TEMPLATE = (
    "Hello, family of *{full_name}* ! How are you?\n\n"
    "We noticed that *{first_name}* was not at school on *{absence_date}*{shift_text}.\n\n"
    "Please justify this absence using the form below:\n\n"
    "*Form Link*\n"
    "{form_url}\n\n"
    "*Why justify?*\n"
    "✓ Keeps attendance records up to date\n"
    "✓ Preserves rights (such as social benefits)\n"
    "✓ Avoids further notices\n\n"
    "*Important for full-day students:*\n"
    "- Absences are recorded separately for each period of the day\n"
    "- Each period counts as an independent absence\n"
    "- Justify whenever necessary\n\n"
    "*Reminder:*\n"
    "- Already justified? You can ignore this message.\n\n"
    "Thank you for your attention and partnership!\n"
    "*{institution_name} Team*"
)

class ClassType(str, Enum):
    REGULAR = 'regular'
    INTEGRAL = 'integral'

    @classmethod
    def from_label(cls, label: str) -> 'ClassType':
        """Parse a class type label such as 'Regular' or 'INTEGRAL'."""
        normalized = (label or '').strip().lower()
        for class_type in cls:
            if class_type.value == normalized:
                return class_type
        raise ValueError(f"Unknown class type: {label!r}")

@dataclass(frozen=True)
class AbsenceNotice:
    """One absence to report to a student's family."""
    class_type: ClassType
    full_name: str
    first_name: str
    absence_date: str
    guardian_first_name: str = ''
    shift_descriptor: Optional[str] = None

def _text(value) -> str:
    return '' if value is None else str(value)

def describe_shift(shift_descriptor) -> str:
    """
    Turn a free-form shift descriptor into the phrase used in integral notices.

    Keywords are matched case-insensitively and the first match wins, so a
    descriptor mentioning 'manhã' is always reported as the morning period.
    Unknown descriptors are echoed back inside the phrase.
    """
    if not shift_descriptor:
        return ''

    descriptor = str(shift_descriptor)

    lowered = descriptor.lower()
    if MORNING_KEYWORD in lowered:
        return "in the *morning* period"
    elif AFTERNOON_KEYWORD in lowered:
        return "in the *afternoon* period"
    elif any(keyword in lowered for keyword in BOTH_SHIFTS_KEYWORDS):
        return "in the *morning and afternoon* periods"
    return f"in the *{descriptor}* shift"

def build_regular_message(
    full_name: str,
    first_name: str,
    absence_date: str,
    guardian_first_name: str,
    legacy_date_string: str = '',
    settings: Optional[MessageSettings] = None
) -> str:
    """
    Build the notice for a student of a single-shift class.

    guardian_first_name and legacy_date_string are accepted for callers that
    still pass them; neither appears in the message.
    """
    settings = settings or DEFAULT_SETTINGS
    logger.debug("Building regular absence message for %s", absence_date)
    return REGULAR_TEMPLATE.format(
        full_name=_text(full_name),
        first_name=_text(first_name),
        absence_date=_text(absence_date),
        form_url=settings.form_url,
        institution_name=settings.institution_name
    )

def build_integral_message(
    full_name: str,
    first_name: str,
    absence_date: str,
    shift_descriptor: Optional[str],
    guardian_first_name: str,
    settings: Optional[MessageSettings] = None
) -> str:
    """Build the notice for a student of a full-day class, naming the missed shift."""
    settings = settings or DEFAULT_SETTINGS
    shift_phrase = describe_shift(shift_descriptor)
    logger.debug(
        "Building integral absence message for %s (shift phrase: %r)",
        absence_date, shift_phrase
    )
    return INTEGRAL_TEMPLATE.format(
        full_name=_text(full_name),
        first_name=_text(first_name),
        absence_date=_text(absence_date),
        shift_text=f" {shift_phrase}" if shift_phrase else '',
        form_url=settings.form_url,
        institution_name=settings.institution_name
    )

def build_absence_message(notice: AbsenceNotice, settings: Optional[MessageSettings] = None) -> str:
    """Pick the template matching the notice's class type and render it."""
    if notice.class_type == ClassType.INTEGRAL:
        return build_integral_message(
            notice.full_name,
            notice.first_name,
            notice.absence_date,
            notice.shift_descriptor,
            notice.guardian_first_name,
            settings=settings
        )
    return build_regular_message(
        notice.full_name,
        notice.first_name,
        notice.absence_date,
        notice.guardian_first_name,
        settings=settings
    )
