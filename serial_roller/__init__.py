"""
Serial Roller Package.

This package maintains a daily-incrementing serial number (``YYYYMMDDCC``)
stored in a plain text file, such as the serial of a DNS zone. Rolling the
serial on the same day increments the counter, on any other day it restarts
at ``01`` under today's date.

The package contains the following main components:

* :class:`SerialCode` - Parsed serial value (date and counter).
* :func:`parse_serial` - Extract the date and counter digits from a line.
* :func:`roll` - Compute the next serial for an injected ``today``.
* :func:`roll_file` - Roll the serial stored in a file, keeping a ``.old`` copy.
* :data:`__version__` - Package version string.

Example::

    >>> import datetime
    >>> import serial_roller
    >>> serial_roller.roll('20010527', '42', datetime.date(2001, 5, 27))
    '2001052743'

"""

from .commit import commit_serial, read_serial_file, roll_file
from .config.meta import __VERSION__ as __version__
from .error import (
    SerialError, ArgumentError, InvalidFormatError, InvalidDateError,
    InvalidCounterError, CounterOverflowError, SerialIOError,
)
from .parse import first_line, parse_serial
from .roll import SerialCode, local_today, roll
