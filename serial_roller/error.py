"""
Error types raised while rolling a serial.

Every failure of a single run maps to one subclass of :class:`SerialError`.
Each subclass carries the process exit code the command line reports for it,
so the CLI only needs one place to translate an error into an exit status.

The module contains the following main components:

* :class:`SerialError` - Base class of all errors in this package.
* :class:`ArgumentError` - Wrong number of command line arguments.
* :class:`InvalidFormatError` - No serial-shaped substring on the first line.
* :class:`InvalidDateError` - Date digits do not form a real calendar date.
* :class:`InvalidCounterError` - Counter digits are not an integer.
* :class:`CounterOverflowError` - Counter cannot grow past its two digits.
* :class:`SerialIOError` - Reading, renaming or writing the file failed.

Example::

    >>> from serial_roller.error import InvalidFormatError
    >>> err = InvalidFormatError('notaserial')
    >>> err.exit_code
    2
    >>> str(err)
    "invalid format: no serial found in 'notaserial'"

"""


class SerialError(Exception):
    """
    Base class of all serial rolling errors.

    :ivar exit_code: Exit status reported by the command line for this error.
    :vartype exit_code: int
    """
    exit_code: int = 1


class ArgumentError(SerialError):
    exit_code = 1

    def __init__(self, message: str = 'filename not given'):
        SerialError.__init__(self, message)


class InvalidFormatError(SerialError):
    exit_code = 2

    def __init__(self, line: str):
        SerialError.__init__(self, f'invalid format: no serial found in {line!r}')
        self.line = line


class InvalidDateError(SerialError):
    exit_code = 3

    def __init__(self, date_string: str, reason: str):
        SerialError.__init__(self, f'invalid date {date_string!r}: {reason}')
        self.date_string = date_string


class InvalidCounterError(SerialError):
    exit_code = 4

    def __init__(self, counter_string: str):
        SerialError.__init__(self, f'invalid counter {counter_string!r}')
        self.counter_string = counter_string


class CounterOverflowError(SerialError):
    """
    Raised when a same-day roll would need a counter wider than two digits.

    A wider counter would break the fixed ``YYYYMMDDCC`` shape, and the next
    run would read the wrong ten digits back.
    """
    exit_code = 5

    def __init__(self, serial: str, maximum: int):
        SerialError.__init__(self, f'counter of serial {serial!r} already reached {maximum}, '
                                   f'no more serials can be issued today')
        self.serial = serial
        self.maximum = maximum


class SerialIOError(SerialError):
    exit_code = 6

    def __init__(self, path: str, reason: str):
        SerialError.__init__(self, f'{path}: {reason}')
        self.path = path
