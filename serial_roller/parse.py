"""
Extraction of the serial digits from file content.

A serial is ten ASCII digits, an eight digit date (``YYYYMMDD``, years 2000
to 2039) directly followed by a two digit counter. Only the digit shape is
checked here; whether the date exists in the calendar is decided by
:mod:`serial_roller.roll`.

Example::

    >>> from serial_roller.parse import parse_serial
    >>> parse_serial('2001052742 garbage-text')
    ('20010527', '42')

"""

import logging
import re
from typing import Tuple

from .error import InvalidFormatError

SERIAL_PATTERN = re.compile(r'(20[0-3][0-9][01][0-9][0-3][0-9])([0-9]{2})')


def first_line(content: str) -> str:
    """
    Get the first line of the given content.

    :param content: Full text content, possibly with several lines.
    :type content: str
    :return: Everything before the first ``\\n``, or the whole content.
    :rtype: str
    """
    return content.split('\n', 1)[0]


def parse_serial(line: str) -> Tuple[str, str]:
    """
    Find the first serial-shaped substring in ``line``.

    Text before and after the serial is ignored. Only the first line of
    ``line`` is scanned, so a serial on a later line is never picked up.

    :param line: Line to scan.
    :type line: str
    :return: Tuple of the eight date digits and the two counter digits, as
        literal substrings.
    :rtype: Tuple[str, str]
    :raises InvalidFormatError: If no serial-shaped substring is found.

    Example::

        >>> parse_serial('serial 2024123105 ; zone')
        ('20241231', '05')
        >>> parse_serial('notaserial')
        Traceback (most recent call last):
            ...
        serial_roller.error.InvalidFormatError: invalid format: no serial found in 'notaserial'
    """
    line = first_line(line)
    match = SERIAL_PATTERN.search(line)
    if match is None:
        raise InvalidFormatError(line)

    date_string, counter_string = match.group(1), match.group(2)
    logging.debug(f'Serial found at position {match.start()}: date {date_string!r}, counter {counter_string!r}.')
    return date_string, counter_string
