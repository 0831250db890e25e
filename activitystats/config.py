"""Reads the settings of activitystats from the environment"""
import math
import os
from dataclasses import dataclass, field
from typing import Mapping
import pytz
from activitystats import utils
from activitystats.progress import CertificateTargets

ENV_PREFIX = 'ACTIVITYSTATS_'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
TRUTHY = ['1', 'true', 'yes', 'on']


@dataclass
class Settings:
    """Settings applied when computing statistics from an export"""
    timezone: pytz.tzinfo.BaseTzInfo = field(default_factory=lambda: pytz.utc)
    targets: CertificateTargets = field(default_factory=CertificateTargets)
    log_level: str = 'INFO'
    derive_state: bool = False


def _get(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(ENV_PREFIX + name)
    if value is None or value.strip() == '':
        return None
    return value.strip()


def _get_target(environ: Mapping[str, str], name: str, default: int | float) -> int | float:
    value = _get(environ, name)
    if value is None:
        return default
    try:
        target = int(value)
    except ValueError:
        try:
            target = float(value)
        except ValueError as e:
            raise ValueError(f'${ENV_PREFIX}{name} must be a number, got {value}') from e
    if isinstance(target, float) and not math.isfinite(target):
        raise ValueError(f'${ENV_PREFIX}{name} must be a finite number, got {value}')
    if target < 0:
        raise ValueError(f'${ENV_PREFIX}{name} must not be negative, got {value}')
    return target


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Builds the settings from environment variables

    Args:
        environ (Mapping[str, str] | None): The environment to read, os.environ if None

    Raises:
        ValueError: Raised when a variable holds an invalid value
    """
    environ = os.environ if environ is None else environ
    defaults = CertificateTargets()

    timezone = pytz.utc
    timezone_name = _get(environ, 'TIMEZONE')
    if timezone_name is not None:
        timezone = utils.get_timezone(timezone_name)

    log_level = (_get(environ, 'LOG_LEVEL') or 'INFO').upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f'${ENV_PREFIX}LOG_LEVEL must be one of {", ".join(LOG_LEVELS)}')

    return Settings(
        timezone=timezone,
        targets=CertificateTargets(
            group_one=_get_target(environ, 'GROUP_ONE_TARGET', defaults.group_one),
            group_two_three=_get_target(environ, 'GROUP_TWO_THREE_TARGET',
                                        defaults.group_two_three)),
        log_level=log_level,
        derive_state=(_get(environ, 'DERIVE_STATE') or '').lower() in TRUTHY)
