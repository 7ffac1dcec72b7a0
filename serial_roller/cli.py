"""
Command line interface of :mod:`serial_roller`.

Usage::

    serial-roller zone.serial
    serial-roller --dry-run zone.serial
    python -m serial_roller -v zone.serial

Exactly one file name must be given. On success the file holds the new serial
and ``zone.serial.old`` the previous content. Every failure is reported by
:func:`report_error` and turned into a non-zero exit code, see
:mod:`serial_roller.error` for the list.

"""

import argparse
import logging
from typing import List, Optional

from hbutils.logging import ColoredFormatter

from .commit import roll_file
from .config.meta import __TITLE__, __VERSION__, __DESCRIPTION__
from .error import SerialError, ArgumentError

_HANDLER_FLAG = '_serial_roller_handler'


def _setup_logging(level: int) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    if not any(getattr(handler, _HANDLER_FLAG, False) for handler in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter())
        setattr(console_handler, _HANDLER_FLAG, True)
        logger.addHandler(console_handler)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        logging.debug(f'Invalid arguments: {message}')
        raise ArgumentError()


def _create_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=__TITLE__.replace('_', '-'), description=__DESCRIPTION__)
    parser.add_argument('filenames', nargs='*', metavar='FILE',
                        help='Serial file, its first line must contain a YYYYMMDDCC serial')
    parser.add_argument('-n', '--dry-run', action='store_true', default=False,
                        help='Print the next serial without changing any file')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', default=False,
                           help='Show debug messages')
    verbosity.add_argument('-q', '--quiet', action='store_true', default=False,
                           help='Only show errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__VERSION__}')
    return parser


def report_error(err: SerialError) -> int:
    """
    Report an error of a run and get the exit code for it.

    Argument errors are printed to the standard output, all other errors are
    logged.

    :param err: Error that stopped the run.
    :type err: SerialError
    :return: Exit code of the process.
    :rtype: int
    """
    if isinstance(err, ArgumentError):
        print(err)
    else:
        logging.error(str(err))
    return err.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    :param argv: Command line arguments without the program name, defaults to
        :data:`sys.argv`.
    :type argv: Optional[List[str]]
    :return: Exit code, ``0`` on success.
    :rtype: int
    """
    try:
        # unknown dash-prefixed words are file names too, e.g. a file called '-zone'
        args, extra_filenames = _create_parser().parse_known_args(argv)
        if args.verbose:
            _setup_logging(logging.DEBUG)
        elif args.quiet:
            _setup_logging(logging.ERROR)
        else:
            _setup_logging(logging.INFO)

        filenames = args.filenames + extra_filenames
        if len(filenames) != 1:
            raise ArgumentError()
        serial = roll_file(filenames[0], dry_run=args.dry_run)
    except SerialError as err:
        return report_error(err)

    if args.dry_run:
        print(serial)
    return 0
