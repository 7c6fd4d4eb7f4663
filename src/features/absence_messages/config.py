import os
from dataclasses import dataclass
from typing import Optional

import pytz
from dotenv import load_dotenv

JUSTIFICATION_FORM_URL = "https://forms.gle/smbzzfNrg7C4EUQKA"
INSTITUTION_PLACEHOLDER = "[Institution Name]"
DEFAULT_TIMEZONE = "America/Sao_Paulo"

@dataclass(frozen=True)
class MessageSettings:
    """Values substituted into every absence notice."""
    institution_name: str = INSTITUTION_PLACEHOLDER
    form_url: str = JUSTIFICATION_FORM_URL

    @classmethod
    def from_env(cls) -> 'MessageSettings':
        """Load settings from the environment, reading a .env file if present."""
        load_dotenv()
        return cls(
            institution_name=os.getenv('INSTITUTION_NAME') or INSTITUTION_PLACEHOLDER,
            form_url=os.getenv('JUSTIFICATION_FORM_URL') or JUSTIFICATION_FORM_URL
        )

def get_school_timezone(name: Optional[str] = None):
    """
    Resolve the school's timezone.
    Falls back to SCHOOL_TIMEZONE, then to America/Sao_Paulo.
    Raises ValueError for unknown zone names.
    """
    zone = name or os.getenv('SCHOOL_TIMEZONE') or DEFAULT_TIMEZONE
    try:
        return pytz.timezone(zone)
    except pytz.UnknownTimeZoneError:
        raise ValueError(f"Unknown timezone: {zone}")
