"""Basic command line argument parser.

Give :meth:`Arguments.parse` the raw argument vector and a list of
:class:`Option` values; it returns which options were seen, their values
and the remaining positional arguments::

    args = Arguments.parse(sys.argv, [
        "debug",
        ("p,port", ArgumentFlags.REQUIRED, OptionFlags.REQUIRED),
        ("v,verbose", ArgumentFlags.OPTIONAL),
    ])

Values are returned as strings; converting them is up to the caller.
"""
import logging

from .arguments import Arguments, ParseOutcome
from .exceptions import (
    MissingRequiredOption,
    MissingRequiredValue,
    OptionException,
    OptionParseException,
    UndefinedKeyLookup,
    UnknownOption,
)
from .option import ArgumentFlags, Option, OptionFlags

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArgumentFlags",
    "Arguments",
    "MissingRequiredOption",
    "MissingRequiredValue",
    "Option",
    "OptionException",
    "OptionFlags",
    "OptionParseException",
    "ParseOutcome",
    "UndefinedKeyLookup",
    "UnknownOption",
]
