"""
Flattening of configuration item dynamic-field columns.

The console's ConfigItem::Add takes every dynamic field through one repeated
option, '--attribute Name=Value'. Workbook columns carry the field type in
their header prefix:

    attr-Vendor           -> --attribute Vendor=<value>
    attrDate-Purchased    -> --attribute Purchased=YYYY-MM-DD
    attrDateTime-Deployed -> --attribute Deployed=YYYY-MM-DD HH:MM:SS

Date values may be natural language ('June 1 2024', 'next monday 10am',
'3 weeks ago'), real date cells, or Excel serial numbers.

Functions:
    parse_natural_datetime: Interpret a cell value as a point in time
    flatten_attribute: Rewrite one (key, value) pair for the console
"""

import datetime
import re
import warnings

import pandas as pd
from openpyxl.utils.datetime import from_excel

from models.errors import DateParseError
from .config import ATTRIBUTE_KEY, ATTRIBUTE_KEY_PATTERN, DATE_FORMAT, DATETIME_FORMAT

_ATTRIBUTE_KEY_RE = re.compile(ATTRIBUTE_KEY_PATTERN)

_WEEKDAYS = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday']
_UNITS = r'(?P<unit>second|minute|hour|day|week|month|year)s?'

_RELATIVE_RE = re.compile(
    r'^(?:(?P<future>in)\s+)?(?P<count>\d+|an?)\s+' + _UNITS + r'(?:\s+(?P<past>ago))?$'
)
_WEEKDAY_RE = re.compile(r'^(?:(?P<direction>next|last|this)\s+)?(?P<weekday>' + '|'.join(_WEEKDAYS) + r')$')
_NEXT_UNIT_RE = re.compile(r'^(?P<direction>next|last)\s+' + _UNITS + r'$')

# Trailing time of day, optionally introduced by 'at': '10am', '13:05', '1:05:30 pm', 'noon'
_TIME_SUFFIX_RE = re.compile(
    r'^(?:(?P<date>.*?)\s+)??(?:at\s+)?'
    r'(?P<time>noon|midnight'
    r'|(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?\s*(?P<meridiem>am|pm)?'
    r'|(?P<bare_hour>\d{1,2})\s*(?P<bare_meridiem>am|pm))$'
)

_DAY_KEYWORDS = {'today': 0, 'tomorrow': 1, 'yesterday': -1}


def _parse_time_of_day(match):
    """Offset from midnight for a _TIME_SUFFIX_RE match; None if out of range."""
    time = match.group('time')
    if time == 'noon':
        return pd.Timedelta(hours=12)
    if time == 'midnight':
        return pd.Timedelta(0)

    if match.group('bare_hour'):
        hour, minute, second = int(match.group('bare_hour')), 0, 0
        meridiem = match.group('bare_meridiem')
    else:
        hour = int(match.group('hour'))
        minute = int(match.group('minute'))
        second = int(match.group('second') or 0)
        meridiem = match.group('meridiem')

    if meridiem:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12 + (12 if meridiem == 'pm' else 0)
    if hour > 23 or minute > 59 or second > 59:
        return None
    return pd.Timedelta(hours=hour, minutes=minute, seconds=second)


def _parse_relative(text, now):
    """
    Day keywords, weekdays and relative offsets; None if text is none of them.

    Day keywords and weekdays resolve to midnight, offsets keep the time of
    day of now. 'next <weekday>' is the first such day after today, 'last
    <weekday>' the last one before today, '<weekday>' / 'this <weekday>'
    today or the first one after.
    """
    if text == 'now':
        return now

    today = now.normalize()
    if text in _DAY_KEYWORDS:
        return today + pd.DateOffset(days=_DAY_KEYWORDS[text])

    match = _WEEKDAY_RE.match(text)
    if match:
        target = _WEEKDAYS.index(match.group('weekday'))
        direction = match.group('direction')
        if direction == 'last':
            return today - pd.DateOffset(days=(today.weekday() - target) % 7 or 7)
        ahead = (target - today.weekday()) % 7
        if direction == 'next':
            ahead = ahead or 7
        return today + pd.DateOffset(days=ahead)

    match = _NEXT_UNIT_RE.match(text)
    if match:
        count = 1 if match.group('direction') == 'next' else -1
        return now + pd.DateOffset(**{match.group('unit') + 's': count})

    match = _RELATIVE_RE.match(text)
    # exactly one direction word
    if not match or bool(match.group('future')) == bool(match.group('past')):
        return None

    count = match.group('count')
    count = 1 if count in ('a', 'an') else int(count)
    if match.group('past'):
        count = -count
    return now + pd.DateOffset(**{match.group('unit') + 's': count})


def _parse_absolute(text):
    """Calendar dates via pandas, numeric forms read day first (01/06/2024 is 1 June)."""
    with warnings.catch_warnings():
        # pandas warns when dayfirst does not apply, e.g. ISO dates
        warnings.simplefilter('ignore', UserWarning)
        return pd.to_datetime(text, dayfirst=True)


def _parse_text(text, now):
    text = ' '.join(text.lower().split())

    match = _TIME_SUFFIX_RE.match(text)
    if match:
        offset = _parse_time_of_day(match)
        if offset is not None:
            date_text = match.group('date')
            if not date_text:
                day = now
            else:
                day = _parse_relative(date_text, now)
                if day is None:
                    day = _parse_absolute(date_text)
            if pd.isna(day):
                raise ValueError(f"no date in {date_text!r}")
            return day.normalize() + offset

    moment = _parse_relative(text, now)
    if moment is None:
        moment = _parse_absolute(text)
    return moment


def parse_natural_datetime(value, now=None, attribute=None):
    """
    Interpret a raw cell value as a point in time.

    Text may be a calendar date ('June 1 2024', '01/06/2024' read day first),
    a day keyword or weekday ('tomorrow', 'next monday', 'last friday'), a
    relative offset ('3 weeks ago', 'in 2 days', 'next month'), any of these
    followed by a time of day ('tomorrow 10am', 'yesterday at noon',
    '1 Jun 2024 13:05'), or a time alone (today at that time).

    Args:
        value: Cell value: datetime/date, Excel serial number, or text
        now: Reference time for relative expressions (default: current time)
        attribute: Field name, only used in the error message

    Returns:
        pd.Timestamp

    Raises:
        DateParseError: value has no interpretable date

    Examples:
        >>> parse_natural_datetime('June 1 2024')
        Timestamp('2024-06-01 00:00:00')

        >>> parse_natural_datetime('in 2 days', now=pd.Timestamp('2024-06-01 08:00'))
        Timestamp('2024-06-03 08:00:00')

        >>> parse_natural_datetime('next monday 9:30', now=pd.Timestamp('2024-06-05'))
        Timestamp('2024-06-10 09:30:00')
    """
    if isinstance(value, bool) or value is None:
        raise DateParseError(value, attribute)

    if isinstance(value, (datetime.datetime, datetime.date)):
        return pd.Timestamp(value)

    if isinstance(value, (int, float)):
        try:
            return pd.Timestamp(from_excel(value))
        except (ValueError, TypeError, OverflowError) as e:
            raise DateParseError(value, attribute) from e

    text = str(value).strip()
    if not text:
        raise DateParseError(value, attribute)

    reference = pd.Timestamp(now) if now is not None else pd.Timestamp.now()
    try:
        moment = _parse_text(text, reference)
    except (ValueError, TypeError, OverflowError) as e:
        raise DateParseError(value, attribute) from e

    if pd.isna(moment):
        raise DateParseError(value, attribute)
    return moment


def flatten_attribute(key, value, now=None):
    """
    Rewrite a dynamic-field column into the console's attribute convention.

    Keys not starting with attr-, attrDate- or attrDateTime- pass through
    unchanged. Otherwise the key is split on its first hyphen into type and
    field name; Date types are parsed and reformatted, DateTime types also
    get the time of day.

    Args:
        key: Column header, e.g. 'attrDate-Purchased'
        value: Raw cell value
        now: Reference time for relative date expressions

    Returns:
        tuple: (key, value) ready for '--key value'

    Raises:
        DateParseError: a Date/DateTime value could not be parsed

    Examples:
        >>> flatten_attribute('name', 'Srv1')
        ('name', 'Srv1')

        >>> flatten_attribute('attr-Vendor', 'Dell')
        ('attribute', 'Vendor=Dell')

        >>> flatten_attribute('attrDateTime-Deployed', '2024-06-01 13:05')
        ('attribute', 'Deployed=2024-06-01 13:05:00')
    """
    if not _ATTRIBUTE_KEY_RE.match(key):
        return key, value

    attr_type, name = key.split('-', 1)

    if 'Date' in attr_type:
        moment = parse_natural_datetime(value, now=now, attribute=name)
        value = moment.strftime(DATETIME_FORMAT if 'Time' in attr_type else DATE_FORMAT)

    return ATTRIBUTE_KEY, f"{name}={value}"
