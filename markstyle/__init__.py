# Markstyle project, MIT license.
#
# https://github.com/markstyle/markstyle/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Markstyle converts Markdown into styled text: a plain string plus font, color
and link attributes attached to character ranges.

Quick start::

    >>> import markstyle.parser
    >>> parser = markstyle.parser.MarkdownParser()
    >>> doc = parser.parse("Hello, **world**!")
    >>> doc.text
    'Hello, world!'

See :mod:`markstyle.parser` for the pipeline, :mod:`markstyle.document` for the
styled text buffer, and :mod:`markstyle.element` for writing your own rules.

"""

from __future__ import annotations

import logging as _logging
import os as _os
import sys as _sys
import warnings

from markstyle import _typing as _t

__version__ = "1.0.0"

__all__ = [
    "MarkstyleWarning",
    "enable_internal_logging",
]


class MarkstyleWarning(RuntimeWarning):
    """
    Base class for all runtime warnings.

    """


def _with_slots() -> dict[str, _t.Any]:
    return {} if _sys.version_info < (3, 11) else {"slots": True}


_logger = _logging.getLogger("markstyle.internal")
_logger.propagate = False

__stderr_handler = _logging.StreamHandler(_sys.__stderr__)
__stderr_handler.setLevel("CRITICAL")
_logger.addHandler(__stderr_handler)


def enable_internal_logging(
    path: str | None = None, level: str | int | None = None, propagate=None
):  # pragma: no cover
    """
    Enable Markstyle's internal logging.

    This function enables :func:`logging.captureWarnings`, enables printing
    of :class:`MarkstyleWarning` messages, and sets up logging channels
    ``markstyle.internal`` and ``py.warnings``.

    :param path:
        if given, adds handlers that output internal log messages to the given file.
    :param level:
        configures logging level for file handler. Default is ``DEBUG``.
    :param propagate:
        if given, enables or disables log message propagation from
        ``markstyle.internal`` and ``py.warnings`` to the root logger.

    """

    if path:
        if level is None:
            level = _os.environ.get("MARKSTYLE_DEBUG", "").strip().upper() or "DEBUG"
        if level in ["1", "Y", "YES", "TRUE"]:
            level = "DEBUG"
        file_handler = _logging.FileHandler(path, delay=True)
        file_handler.setFormatter(
            _logging.Formatter("%(filename)s:%(lineno)d: %(levelname)s: %(message)s")
        )
        file_handler.setLevel(level)
        _logger.addHandler(file_handler)
        _logger.setLevel(level)
        _logging.getLogger("py.warnings").addHandler(file_handler)

    _logging.captureWarnings(True)
    warnings.simplefilter("default", category=MarkstyleWarning)

    if propagate is not None:
        _logging.getLogger("py.warnings").propagate = propagate
        _logger.propagate = propagate


_debug = "MARKSTYLE_DEBUG" in _os.environ or "MARKSTYLE_DEBUG_FILE" in _os.environ
if _debug:  # pragma: no cover
    enable_internal_logging(
        path=_os.environ.get("MARKSTYLE_DEBUG_FILE") or "markstyle.log",
        propagate=False,
    )
else:
    warnings.simplefilter("ignore", category=MarkstyleWarning, append=True)
