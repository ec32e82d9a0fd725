"""Epoch-millisecond <-> local calendar conversion.

The only place in humanformat that touches a time zone. By default the host's
local offset at the instant being converted is used (so DST transitions are
respected); an explicit tzinfo keyword overrides it. Calendar values handed
to the renderer and returned by the parser are always naive.

Python 3.13+. Zero external dependencies.
"""

from datetime import UTC, date, datetime, time, timedelta, tzinfo as TzInfo  # noqa: N812

from humanformat.constants import MILLIS_PER_SECOND

__all__ = [
    "day_end_millis",
    "day_start_millis",
    "epoch_millis_to_local",
    "local_to_epoch_millis",
    "today_end_millis",
    "today_start_millis",
]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLI = timedelta(milliseconds=1)


def epoch_millis_to_local(millis: int, *, tzinfo: TzInfo | None = None) -> datetime:
    """Convert epoch milliseconds to a naive local datetime.

    Args:
        millis: Milliseconds since 1970-01-01T00:00:00Z (may be negative)
        tzinfo: Zone to convert into (default: host local zone)

    Returns:
        Naive datetime with millisecond precision

    Raises:
        ValueError: If the instant is outside the datetime range

    Example:
        >>> epoch_millis_to_local(976390245123, tzinfo=UTC)
        datetime.datetime(2000, 12, 9, 19, 30, 45, 123000)
    """
    seconds, remainder = divmod(millis, MILLIS_PER_SECOND)
    try:
        if tzinfo is None:
            local = datetime.fromtimestamp(seconds)
        else:
            local = datetime.fromtimestamp(seconds, tzinfo).replace(tzinfo=None)
    except (OverflowError, OSError) as e:
        msg = f"Epoch milliseconds {millis} are outside the supported datetime range"
        raise ValueError(msg) from e
    return local.replace(microsecond=remainder * 1000)


def local_to_epoch_millis(value: datetime, *, tzinfo: TzInfo | None = None) -> int:
    """Convert a local datetime to epoch milliseconds.

    Naive values are interpreted in tzinfo, or in the host local zone when
    tzinfo is None. Aware values keep their own offset. Sub-millisecond
    precision is truncated.

    Raises:
        ValueError: If the host cannot represent the instant
        OverflowError: If the instant is outside the platform time range
    """
    if value.tzinfo is None and tzinfo is not None:
        value = value.replace(tzinfo=tzinfo)
    if value.tzinfo is not None:
        return (value - _EPOCH) // _ONE_MILLI
    seconds = int(value.replace(microsecond=0).timestamp())
    return seconds * MILLIS_PER_SECOND + value.microsecond // 1000


def _local_date(value: int | datetime, tzinfo: TzInfo | None) -> date:
    if not isinstance(value, datetime):
        return epoch_millis_to_local(value, tzinfo=tzinfo).date()
    if value.tzinfo is None:
        return value.date()
    # Aware values are moved into the target zone first.
    return value.astimezone(tzinfo).date()


def day_start_millis(value: int | datetime, *, tzinfo: TzInfo | None = None) -> int:
    """Epoch milliseconds of the local midnight that starts value's day.

    Args:
        value: Epoch milliseconds, or a local datetime (naive values are read
            as already local; only their date is used)
        tzinfo: Zone whose midnight is wanted (default: host local zone)

    Example:
        >>> day_start_millis(datetime(2000, 12, 9, 19, 30), tzinfo=UTC)
        976320000000
    """
    local_date = _local_date(value, tzinfo)
    return local_to_epoch_millis(datetime.combine(local_date, time.min), tzinfo=tzinfo)


def day_end_millis(value: int | datetime, *, tzinfo: TzInfo | None = None) -> int:
    """Epoch milliseconds of the last millisecond of value's local day.

    Computed as the next local midnight minus one millisecond, so days that
    are 23 or 25 hours long across a DST change are handled.
    """
    next_midnight = datetime.combine(_local_date(value, tzinfo) + timedelta(days=1), time.min)
    return local_to_epoch_millis(next_midnight, tzinfo=tzinfo) - 1


def _now_millis() -> int:
    return (datetime.now(UTC) - _EPOCH) // _ONE_MILLI


def today_start_millis(*, tzinfo: TzInfo | None = None) -> int:
    """Epoch milliseconds of today's local midnight."""
    return day_start_millis(_now_millis(), tzinfo=tzinfo)


def today_end_millis(*, tzinfo: TzInfo | None = None) -> int:
    """Epoch milliseconds of the last millisecond of today (local)."""
    return day_end_millis(_now_millis(), tzinfo=tzinfo)
