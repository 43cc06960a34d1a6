from dataclasses import InitVar, dataclass, field
from enum import Enum
from typing import Tuple, Union


class ArgumentFlags(Enum):
    """Whether a value token may or must follow the flag on the command line."""
    NONE = "none"
    OPTIONAL = "optional"
    REQUIRED = "required"


class OptionFlags(Enum):
    """Flags for the option itself, as given to the parser."""
    NONE = 0x0
    REQUIRED = 0x1


@dataclass(frozen=True)
class Option:
    """A single recognized command line option.

    The specifier is either a short name (``"z"``), a long name
    (``"debug"``) or both separated by a comma (``"p,port"``). Malformed
    specifiers are not rejected; the missing name is left empty and simply
    never matches a token.
    """
    spec: str
    aflags: InitVar[ArgumentFlags] = ArgumentFlags.NONE
    oflags: InitVar[OptionFlags] = OptionFlags.NONE
    argument_flags: ArgumentFlags = field(init=False, default=ArgumentFlags.NONE)
    option_flags: OptionFlags = field(init=False, default=OptionFlags.NONE)
    short_name: str = field(init=False, default="")
    long_name: str = field(init=False, default="")

    def __post_init__(self, aflags, oflags):
        object.__setattr__(self, "argument_flags", aflags)
        object.__setattr__(self, "option_flags", oflags)
        short, long = "", ""
        if len(self.spec) == 1:
            short = self.spec
        elif len(self.spec) > 1 and self.spec[1] == ",":
            short, long = self.spec[0], self.spec[2:]
        elif len(self.spec) > 1:
            long = self.spec
        object.__setattr__(self, "short_name", short)
        object.__setattr__(self, "long_name", long)

    @classmethod
    def coerce(cls, value: Union["Option", str, tuple]) -> "Option":
        if isinstance(value, Option):
            return value
        if isinstance(value, str):
            return cls(value)
        return cls(*value)

    def names(self) -> Tuple[str, ...]:
        return tuple(name for name in (self.short_name, self.long_name) if name)

    def matches(self, candidate: str) -> bool:
        return candidate in self.names()

    @property
    def display_name(self) -> str:
        return self.long_name or self.short_name

    @property
    def takes_value(self) -> bool:
        return self.argument_flags is not ArgumentFlags.NONE

    @property
    def requires_value(self) -> bool:
        return self.argument_flags is ArgumentFlags.REQUIRED

    @property
    def is_required(self) -> bool:
        return self.option_flags is OptionFlags.REQUIRED
