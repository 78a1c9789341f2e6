import re

_MICROS_PER_UNIT: dict[str, int] = {
    'microsecond': 1,
    'millisecond': 1_000,
    'second': 1_000_000,
    'minute': 60 * 1_000_000,
    'hour': 60 * 60 * 1_000_000,
    'day': 24 * 60 * 60 * 1_000_000,
    'week': 7 * 24 * 60 * 60 * 1_000_000,
}

_UNSUPPORTED_UNITS = ('month', 'year')

_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1

_PAIR = re.compile(r'([+-]?\d+)\s+([a-z]+)')


def parse_interval_as_millis(raw: str) -> int:
    '''Parse a calendar interval string into a number of milliseconds.

    Accepts an optional leading ``interval`` keyword followed by one or more
    ``<number> <unit>`` pairs, e.g. ``'interval 1 week'`` or
    ``'1 day 12 hours'``. Months and years have no fixed length and are
    rejected.

    Parameters
    ----------
    raw : str
        The interval string.

    Returns
    -------
    int
        The interval length in milliseconds, truncated toward zero.

    Raises
    ------
    ValueError
        When the string is empty, malformed, uses an unsupported unit or
        does not fit in a signed 64-bit microsecond count.
    '''
    text = raw.strip().lower()
    if text.startswith('interval'):
        text = text[len('interval') :].strip()
    if not text:
        raise ValueError(f'Interval string cannot be empty: {raw!r}')

    micros = 0
    pos = 0
    while pos < len(text):
        match = _PAIR.match(text, pos)
        if match is None:
            raise ValueError(f'Error parsing interval {raw!r}')

        amount = int(match.group(1))
        unit = match.group(2).removesuffix('s')
        if unit in _UNSUPPORTED_UNITS:
            raise ValueError(
                f'Error parsing interval {raw!r}: {unit}s are not supported, '
                'you may specify \'365 days\' for a year instead'
            )
        if unit not in _MICROS_PER_UNIT:
            raise ValueError(f'Error parsing interval {raw!r}: unknown unit {match.group(2)!r}')

        micros += amount * _MICROS_PER_UNIT[unit]
        if not _LONG_MIN <= micros <= _LONG_MAX:
            raise ValueError(f'Error parsing interval {raw!r}: interval is out of range')
        pos = match.end()
        if pos < len(text) and not text[pos].isspace():
            raise ValueError(f'Error parsing interval {raw!r}')
        while pos < len(text) and text[pos].isspace():
            pos += 1

    # Truncate toward zero, negative intervals included
    millis = abs(micros) // 1_000
    return millis if micros >= 0 else -millis
