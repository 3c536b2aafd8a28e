from core.schemas import NormalizedAppointment, PPMWebhookPayload, PPMCustomData, PPMContact, NOT_SPECIFIED
from dateutil import parser
from datetime import datetime
from typing import Mapping, Optional
import logging
import math


logger = logging.getLogger(__name__)

TIME_FMT = "%H:%M"
DEFAULT_DURATION_MINUTES = 60

# only the time of day matters, every time string is pinned to this date
REFERENCE_DATE = datetime(1970, 1, 1)


def extract_appointment(payload: PPMWebhookPayload) -> NormalizedAppointment:
    custom = payload.customData or PPMCustomData()
    contact = payload.contact or PPMContact()

    return NormalizedAppointment(
        appointment_id=custom.appointment_id,
        start_date=custom.start_date,
        start_time=custom.start_time,
        end_date=custom.end_date,
        end_time=custom.end_time,
        contact_name=custom.contact_name or contact.full_name,
        contact_email=custom.contact_email or contact.email,
        practitioner_name=custom.practitioner_name or NOT_SPECIFIED,
    )


def _parse_time_of_day(time_str: str) -> datetime:
    parsed = parser.parse(time_str, default=REFERENCE_DATE, dayfirst=False)
    return parsed.replace(tzinfo=None)


def format_date_for_nookal(date_str: Optional[str]) -> Optional[str]:
    """Convert "July 16, 2025" to "2025-07-16". Unparseable input gives None."""
    if not date_str:
        return None

    try:
        parsed = parser.parse(date_str, dayfirst=False)
    except (ValueError, OverflowError) as e:
        logger.error(f"Date formatting error for {date_str!r}: {e}")
        return None
    # always a zero-padded four-digit year
    return parsed.date().isoformat()


def format_time_for_nookal(time_str: Optional[str]) -> Optional[str]:
    """Convert "7:00 AM" to "07:00". Unparseable input gives None."""
    if not time_str:
        return None

    try:
        parsed = _parse_time_of_day(time_str)
    except (ValueError, OverflowError) as e:
        logger.error(f"Time formatting error for {time_str!r}: {e}")
        return None
    return parsed.strftime(TIME_FMT)


def calculate_duration(start_time: Optional[str], end_time: Optional[str]) -> int:
    if not start_time or not end_time:
        return DEFAULT_DURATION_MINUTES

    try:
        start = _parse_time_of_day(start_time)
        end = _parse_time_of_day(end_time)
    except (ValueError, OverflowError) as e:
        logger.error(f"Duration calculation error for {start_time!r} -> {end_time!r}: {e}")
        return DEFAULT_DURATION_MINUTES

    diff_minutes = math.floor((end - start).total_seconds() / 60 + 0.5)
    return diff_minutes if diff_minutes > 0 else DEFAULT_DURATION_MINUTES


def resolve_practitioner_id(practitioner_name: str, practitioner_map: Mapping[str, str], default_id: str) -> str:
    # exact, case-sensitive match only
    return practitioner_map.get(practitioner_name, default_id)
