"""
Elapsed-time threshold checks shared by every scheduler stage.

A missing or malformed start instant never raises: it simply never
crosses a threshold, so one bad campaign cannot block the others.
"""

import logging
from datetime import date, datetime, time, timedelta

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def coerce_instant(value, now):
    """
    Turn a datetime, date or ISO-8601 string into an aware datetime.

    Naive values and bare dates are placed in now's timezone.
    Returns None for anything that cannot be interpreted.
    """
    if value is None:
        return None

    if isinstance(value, str):
        try:
            parsed = parse_datetime(value) or parse_date(value)
        except ValueError:
            return None
        if parsed is None:
            return None
        value = parsed

    if isinstance(value, datetime):
        instant = value
    elif isinstance(value, date):
        instant = datetime.combine(value, time.min)
    else:
        return None

    if timezone.is_naive(instant):
        tz = now.tzinfo if timezone.is_aware(now) else timezone.get_default_timezone()
        instant = timezone.make_aware(instant, tz)

    return instant


def days_elapsed(start, now):
    """Whole days between start and now (floored), or None."""
    instant = coerce_instant(start, now)
    if instant is None:
        return None

    if timezone.is_naive(now):
        now = timezone.make_aware(now, instant.tzinfo)

    return (now - instant) // ONE_DAY


def threshold_crossed(start, threshold_days, now):
    """True iff at least threshold_days whole days have passed since start."""
    if threshold_days is None:
        return False

    elapsed = days_elapsed(start, now)
    if elapsed is None:
        logger.debug("Unusable start instant %r; treating threshold as not crossed", start)
        return False

    return elapsed >= threshold_days


def has_passed(value, now):
    """True iff value is a usable instant strictly before now."""
    instant = coerce_instant(value, now)
    if instant is None:
        return False

    if timezone.is_naive(now):
        now = timezone.make_aware(now, instant.tzinfo)

    return now > instant
