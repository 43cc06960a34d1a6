import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .exceptions import (
    MissingRequiredOption,
    MissingRequiredValue,
    OptionException,
    UndefinedKeyLookup,
    UnknownOption,
)
from .option import Option

logger = logging.getLogger(__name__)

SENTINEL = "--"
HELP_NAMES = ("h", "help")

OptionLike = Union[Option, str, tuple]


class Arguments:
    """Holds the parsed options and the arguments no option consumed.

    Values are the very string objects found in the argument vector; an
    option given without a value maps to the empty string. A result is
    never modified after :meth:`parse` builds it.
    """

    def __init__(self, help_requested: bool = False, values: Optional[Mapping[str, str]] = None,
                 positional: Iterable[str] = ()):
        self._help = help_requested
        self._values = MappingProxyType(dict(values or {}))
        self._positional = tuple(positional)

    @classmethod
    def parse(cls, argv: Sequence[str], options: Iterable[OptionLike]) -> "Arguments":
        """Parse ``argv`` (program name first) against ``options``.

        Scanning stops at the first ``--``; everything after it is appended
        verbatim to the positional arguments. ``-h``/``--help`` ends the
        scan early and skips the required option check.

        Raises:
            UnknownOption: a flag matches no option.
            MissingRequiredValue: a REQUIRED value is not followed by a value token.
            MissingRequiredOption: a REQUIRED option never appeared.
        """
        options = [Option.coerce(o) for o in options]
        tokens = list(argv[1:])
        boundary = tokens.index(SENTINEL) if SENTINEL in tokens else len(tokens)
        logger.debug("parsing %d tokens, sentinel at %d", len(tokens), boundary)

        help_requested = False
        values: Dict[str, str] = {}
        positional: List[str] = []

        i = 0
        while i < boundary:
            arg = tokens[i]
            i += 1
            if not arg:
                continue
            if not arg.startswith("-"):
                positional.append(arg)
                continue
            if arg == "-":
                continue

            name = arg[2:] if arg.startswith("--") else arg[1:]
            if name in HELP_NAMES:
                logger.debug("help requested by '%s'", arg)
                help_requested = True
                break

            option = _find_option(options, name)
            value = ""
            if option.takes_value:
                if i < boundary and not tokens[i].startswith("-"):
                    value = tokens[i]
                    i += 1
                elif option.requires_value:
                    raise MissingRequiredValue(name)
            logger.debug("matched option '%s' with value %r", name, value)

            # the first occurrence of an option wins
            for key in option.names():
                values.setdefault(key, value)

        if not help_requested:
            for option in options:
                if option.is_required and not any(n in values for n in option.names()):
                    raise MissingRequiredOption(option.display_name)

        positional.extend(tokens[boundary + 1:])
        return cls(help_requested, values, positional)

    @classmethod
    def try_parse(cls, argv: Sequence[str], options: Iterable[OptionLike]) -> "ParseOutcome":
        """Like :meth:`parse`, but returns the error instead of raising it."""
        try:
            return ParseOutcome(arguments=cls.parse(argv, options))
        except OptionException as e:
            return ParseOutcome(error=e)

    @property
    def help(self) -> bool:
        return self._help

    @property
    def values(self) -> Mapping[str, str]:
        return self._values

    @property
    def positional(self) -> Tuple[str, ...]:
        return self._positional

    unparsed = positional

    def exists(self, name: str) -> bool:
        return name in self._values

    def value(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise UndefinedKeyLookup(name) from None

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __getitem__(self, name: str) -> str:
        return self.value(name)

    def __eq__(self, other):
        if not isinstance(other, Arguments):
            return NotImplemented
        return (self._help, dict(self._values), self._positional) == \
            (other._help, dict(other._values), other._positional)

    def __repr__(self):
        return (f"Arguments(help={self._help!r}, values={dict(self._values)!r}, "
                f"positional={list(self._positional)!r})")


@dataclass(frozen=True)
class ParseOutcome:
    """Either the parsed arguments or the error that stopped the parse."""
    arguments: Optional[Arguments] = None
    error: Optional[OptionException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Arguments:
        if self.error is not None:
            raise self.error
        return self.arguments


def _find_option(options: Sequence[Option], name: str) -> Option:
    for option in options:
        if option.matches(name):
            return option
    raise UnknownOption(name)
