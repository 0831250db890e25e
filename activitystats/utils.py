"""Contains utility methods used throughout the package"""
import re
import unicodedata
from datetime import datetime
import pytz
from activitystats.models import PointGroup, DEFAULT_POINT_GROUP

RED_ADDRESS_KEYWORD = 'dia chi do'

SUPPORTED_FORMATS = [
    '%d-%m-%Y %H:%M',
    '%d/%m/%Y %H:%M',
    '%d-%m-%Y',
    '%d/%m/%Y',
]


def strptime_no_exception(datetime_str: str, format_str) -> datetime | None:
    """Executes datetime.strptime without throwing an exception"""
    try:
        return datetime.strptime(datetime_str, format_str)
    except ValueError:
        pass
    return None


def get_datetime_from_supported_formats(datetime_str: str) -> datetime:
    """Returns a datetime object parsed from ISO 8601 or any supported day-first format

    Raises:
        ValueError: Raised when no supported pattern matches
    """
    datetime_str = datetime_str.strip()
    try:
        return datetime.fromisoformat(datetime_str)
    except ValueError:
        pass
    for format_str in SUPPORTED_FORMATS:
        dt = strptime_no_exception(datetime_str, format_str)
        if dt is not None:
            return dt
    raise ValueError(
        f'Could not match {datetime_str} to any supported format')


def get_timezone(name: str) -> pytz.tzinfo.BaseTzInfo:
    """Looks up a timezone case insensitively, e.g. 'asia/ho_chi_minh'

    Raises:
        ValueError: Raised when the timezone is unknown
    """
    for possible_timezone in pytz.all_timezones:
        if possible_timezone.lower() == name.lower().strip():
            return pytz.timezone(possible_timezone)
    raise ValueError(f'Unknown timezone {name}')


def get_utc_datetime_from_supported_formats(
        datetime_str: str,
        timezone: pytz.tzinfo.BaseTzInfo) -> datetime:
    """Generate a UTC datetime object from string, localizing naive values to timezone

    Raises:
        ValueError: Raised when no supported pattern matches
    """
    dt = get_datetime_from_supported_formats(datetime_str)
    if dt.tzinfo is None:
        dt = timezone.localize(dt)
    return dt.astimezone(pytz.utc)


def utc_now() -> datetime:
    return datetime.now(pytz.utc)


def normalize_text(value: str | None) -> str:
    """Strips accents, folds 'đ' to 'd' and lowercases, replacing anything else by spaces"""
    if not value:
        return ''
    decomposed = unicodedata.normalize('NFD', str(value))
    stripped = re.sub('[\u0300-\u036f]', '', decomposed)
    stripped = re.sub('[đĐ]', 'd', stripped).lower()
    return re.sub('[^a-z0-9\\s]', ' ', stripped)


def contains_red_address_keyword(*sources: str | None) -> bool:
    """Whether any of the texts mentions a 'Địa chỉ đỏ' (red address) activity"""
    return any(RED_ADDRESS_KEYWORD in normalize_text(source) for source in sources)


def normalize_point_group(value) -> PointGroup:
    """Maps 'NHOM_2', 'nhom_2', '2' or 2 onto a PointGroup, defaulting to group one"""
    if value is None:
        return DEFAULT_POINT_GROUP
    if isinstance(value, PointGroup):
        return value
    candidate = str(value).strip().upper()
    if candidate.isdigit():
        candidate = f'NHOM_{candidate}'
    if candidate in PointGroup:
        return PointGroup(candidate)
    return DEFAULT_POINT_GROUP
