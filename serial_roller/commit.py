"""
Serial file handling.

This module reads a serial file, rolls its serial and writes the result back.
The previous content is kept next to the file with an ``.old`` suffix.

The module contains the following main components:

* :func:`read_serial_file` - Read the content of a serial file.
* :func:`commit_serial` - Archive the file as ``.old`` and write a new serial.
* :func:`roll_file` - Read, roll and commit in one call.

.. note::
   The new serial is always computed before anything on disk is changed, so
   a file with a broken serial is left untouched. The archive rename and the
   write of the new file are two separate steps though; if the process dies in
   between, only the ``.old`` file remains.

.. note::
   Concurrent runs on the same file are not coordinated.

Example::

    >>> from serial_roller.commit import roll_file
    >>> roll_file('zone.serial')  # doctest: +SKIP
    '2001052702'

"""

import datetime
import logging
import os
from typing import Optional

from .error import SerialIOError
from .roll import SerialCode, local_today

OLD_SUFFIX = '.old'


def old_file_path(path: str) -> str:
    return path + OLD_SUFFIX


def read_serial_file(path: str) -> str:
    """
    Read the full content of a serial file.

    :param path: Path of the serial file.
    :type path: str
    :return: File content.
    :rtype: str
    :raises SerialIOError: If the file cannot be read.
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except OSError as e:
        raise SerialIOError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SerialIOError(path, f'not a UTF-8 text file ({e.reason})') from e


def commit_serial(path: str, serial: str) -> str:
    """
    Replace the serial file with a new one containing only ``serial``.

    The existing file is moved to ``<path>.old`` (an older ``.old`` file is
    overwritten), then a fresh file is created at ``path`` holding exactly
    ``serial``, without trailing newline.

    :param path: Path of the serial file.
    :type path: str
    :param serial: New serial to write.
    :type serial: str
    :return: Path of the archived ``.old`` file.
    :rtype: str
    :raises SerialIOError: If the rename or the write fails.
    """
    old_path = old_file_path(path)
    try:
        os.replace(path, old_path)
    except OSError as e:
        raise SerialIOError(path, f'cannot archive to {old_path!r}: {e.strerror or e}') from e
    logging.debug(f'Previous content archived to {old_path!r}.')

    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(serial)
    except OSError as e:
        raise SerialIOError(path, f'cannot write new serial, previous content is kept in {old_path!r}: '
                                  f'{e.strerror or e}') from e

    return old_path


def roll_file(path: str, today: Optional[datetime.date] = None, dry_run: bool = False) -> str:
    """
    Roll the serial stored in a file.

    :param path: Path of the serial file.
    :type path: str
    :param today: Current date, defaults to the local date of the system clock.
    :type today: Optional[datetime.date]
    :param dry_run: Only compute the next serial, do not touch any file.
    :type dry_run: bool
    :return: The new serial.
    :rtype: str
    :raises SerialIOError: If the file cannot be read, archived or written.
    :raises InvalidFormatError: If the first line has no serial.
    :raises InvalidDateError: If the serial's date is not a real date.
    :raises CounterOverflowError: If no more serials can be issued today.

    Example::

        >>> import datetime
        >>> with open('zone.serial', 'w') as f:  # doctest: +SKIP
        ...     f.write('2001052701')
        >>> roll_file('zone.serial', today=datetime.date(2001, 5, 27))  # doctest: +SKIP
        '2001052702'
        >>> open('zone.serial.old').read()  # doctest: +SKIP
        '2001052701'
    """
    today = today or local_today()
    content = read_serial_file(path)
    current = SerialCode.parse(content)
    serial = str(current.next(today))

    if dry_run:
        logging.info(f'Dry run, {path!r} is not changed: {current} would roll to {serial}')
    else:
        commit_serial(path, serial)
        logging.info(f'Serial rolled: {current} -> {serial}')
    return serial
