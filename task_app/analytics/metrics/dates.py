"""Timestamp normalization helpers shared by the analytics modules."""

from __future__ import annotations

from datetime import date, datetime, tzinfo

import pandas as pd
import pytz

from task_app.core.config import TIMEZONE


def resolve_timezone(tz: tzinfo | str | None = None) -> tzinfo:
    """Return a tzinfo for ``tz``, falling back to the configured TIMEZONE."""
    if tz is None:
        return pytz.timezone(TIMEZONE)
    if isinstance(tz, str):
        return pytz.timezone(tz)
    return tz


def normalize_timestamp(value, target_tz) -> pd.Timestamp | None:
    """Normalize a timestamp-like value into `target_tz`.

    Naive values are assumed to be UTC. Returns None when the input cannot be
    parsed.
    """
    if value is None or value == "":
        return None
    ts = pd.to_datetime(value, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    if getattr(ts, "tzinfo", None) is None:
        ts = ts.tz_localize(pytz.UTC)
    return ts.tz_convert(target_tz)


def as_utc(value) -> pd.Timestamp | None:
    """Comparable UTC timestamp for ``value`` (naive read as UTC), None when absent."""
    return normalize_timestamp(value, pytz.UTC)


def local_day(value: datetime, tz: tzinfo | str | None = None) -> date | None:
    """Calendar day of ``value`` in the reference timezone (time-of-day stripped)."""
    ts = normalize_timestamp(value, resolve_timezone(tz))
    if ts is None:
        return None
    return ts.date()


def now_in(tz: tzinfo | str | None = None) -> datetime:
    return datetime.now(tz=resolve_timezone(tz))
