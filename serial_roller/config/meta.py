"""
Metadata definitions for the :mod:`serial_roller` package.

This module defines the core metadata constants used by package configuration
tools such as ``pyproject.toml`` or build scripts. The values describe the
project identity, versioning, and authorship.

The module contains the following main components:

* :data:`__TITLE__` - Project title
* :data:`__VERSION__` - Project version string
* :data:`__DESCRIPTION__` - Short project description
* :data:`__AUTHOR__` - Project authors

Example::

    >>> from serial_roller.config import meta
    >>> meta.__TITLE__
    'serial_roller'
    >>> meta.__VERSION__
    '0.1.0'

"""

#: Title of this project (should be `serial_roller`).
__TITLE__: str = 'serial_roller'

#: Version of this project.
__VERSION__: str = '0.1.0'

#: Short description of the project, will be included in ``pyproject.toml``.
__DESCRIPTION__: str = 'Roll a daily-incrementing YYYYMMDDCC serial stored in a text file'

#: Author of this project.
__AUTHOR__: str = 'serial_roller contributors'
