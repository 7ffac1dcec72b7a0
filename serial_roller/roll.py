"""
Computation of the next serial.

The rolling rule is simple: a serial issued today gets its counter
incremented, a serial from any other day is replaced by today's first serial
(counter ``01``). The current date is always passed in explicitly, the only
place that reads the system clock is :func:`local_today`.

The module contains the following main components:

* :class:`SerialCode` - Immutable parsed serial (date and counter).
* :func:`roll` - Compute the next serial string from date and counter digits.
* :func:`local_today` - Today's date on the local wall clock.

Example::

    >>> import datetime
    >>> from serial_roller.roll import roll
    >>> roll('20010527', '42', datetime.date(2001, 5, 27))
    '2001052743'
    >>> roll('20010527', '42', datetime.date(2001, 5, 28))
    '2001052801'

"""

import datetime
import logging
from dataclasses import dataclass

from .error import InvalidDateError, InvalidCounterError, CounterOverflowError
from .parse import parse_serial

DATE_FORMAT = '%Y%m%d'
COUNTER_WIDTH = 2
COUNTER_MAX = 10 ** COUNTER_WIDTH - 1
FIRST_COUNTER = 1


def parse_date(date_string: str) -> datetime.date:
    """
    Convert ``YYYYMMDD`` digits into a calendar date.

    Unlike :func:`datetime.datetime.strptime`, exactly eight digits are
    required and no field may be shortened.

    :param date_string: Eight date digits.
    :type date_string: str
    :return: The calendar date.
    :rtype: datetime.date
    :raises InvalidDateError: If the digits do not form a real date.
    """
    if len(date_string) != 8 or not date_string.isascii() or not date_string.isdigit():
        raise InvalidDateError(date_string, 'expected 8 digits in YYYYMMDD form')
    try:
        return datetime.date(int(date_string[:4]), int(date_string[4:6]), int(date_string[6:]))
    except ValueError as e:
        raise InvalidDateError(date_string, str(e)) from e


def parse_counter(counter_string: str) -> int:
    """
    Convert the counter digits into a non-negative integer.

    :param counter_string: Counter digits.
    :type counter_string: str
    :return: Counter value.
    :rtype: int
    :raises InvalidCounterError: If the content is not a plain decimal number.
    """
    if not counter_string.isascii() or not counter_string.isdigit():
        raise InvalidCounterError(counter_string)
    return int(counter_string)


def format_serial(date: datetime.date, counter: int) -> str:
    return f'{date.strftime(DATE_FORMAT)}{counter:0{COUNTER_WIDTH}d}'


@dataclass(frozen=True)
class SerialCode:
    """
    Parsed serial, a calendar date plus the number of the serial on that date.

    :param date: Date the serial was issued on.
    :type date: datetime.date
    :param counter: Counter of the serial on that date.
    :type counter: int

    Example::

        >>> import datetime
        >>> code = SerialCode.parse('2001052742\\n')
        >>> code
        SerialCode(date=datetime.date(2001, 5, 27), counter=42)
        >>> str(code.next(datetime.date(2001, 5, 27)))
        '2001052743'
    """
    date: datetime.date
    counter: int

    @classmethod
    def parse(cls, content: str) -> 'SerialCode':
        """
        Build a serial from file content, only the first line is used.

        :raises InvalidFormatError: If no serial is found on the first line.
        :raises InvalidDateError: If the date digits are not a real date.
        :raises InvalidCounterError: If the counter digits are not a number.
        """
        date_string, counter_string = parse_serial(content)
        return cls(parse_date(date_string), parse_counter(counter_string))

    def next(self, today: datetime.date) -> 'SerialCode':
        """
        Get the serial following this one when issued on ``today``.

        :param today: Current date.
        :type today: datetime.date
        :return: Next serial.
        :rtype: SerialCode
        :raises CounterOverflowError: If this serial is from ``today`` and its
            counter is already at the maximum of two digits.
        """
        if self.date == today:
            if self.counter >= COUNTER_MAX:
                raise CounterOverflowError(str(self), COUNTER_MAX)
            return SerialCode(today, self.counter + 1)

        if self.date > today:
            logging.warning(f'Serial date {self.date.isoformat()} is later than today ({today.isoformat()}), '
                            f'the system clock may be wrong. Restarting the serial from today.')
        return SerialCode(today, FIRST_COUNTER)

    def __str__(self):
        return format_serial(self.date, self.counter)


def roll(date_string: str, counter_string: str, today: datetime.date) -> str:
    """
    Compute the serial following the given date and counter digits.

    :param date_string: Date digits of the current serial (``YYYYMMDD``).
    :type date_string: str
    :param counter_string: Counter digits of the current serial.
    :type counter_string: str
    :param today: Current date. Never read from the clock here, so the result
        only depends on the arguments.
    :type today: datetime.date
    :return: The next serial, ``today`` as ``YYYYMMDD`` followed by the two
        digit counter.
    :rtype: str
    :raises InvalidDateError: If ``date_string`` is not a real date.
    :raises InvalidCounterError: If ``counter_string`` is not a number.
    :raises CounterOverflowError: If the serial is from ``today`` and its
        counter is already ``99``.

    Example::

        >>> import datetime
        >>> roll('20010527', '01', datetime.date(2001, 5, 27))
        '2001052702'
        >>> roll('20010527', '42', datetime.date(2001, 5, 28))
        '2001052801'
    """
    current = SerialCode(parse_date(date_string), parse_counter(counter_string))
    return str(current.next(today))


def local_today() -> datetime.date:
    """
    Get today's date on the local wall clock.
    """
    return datetime.date.today()
