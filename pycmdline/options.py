from typing import Any, List, Optional, Tuple

from .errors import InvalidOptionFormatError, MissingArgumentError
from .help import format_option
from .values import coerce


def is_argument(token: str) -> bool:
    return not token.startswith("-")


def split_names(names: str) -> Tuple[str, str]:
    """Split ``"s,long"`` or ``"long"`` into ``(short_name, long_name)``.

    The two-name form needs a one-character short name and a long name of at
    least two characters. Neither name may start with ``-``.
    """
    if "," in names:
        short_name, long_name = names.split(",", 1)
        if short_name.startswith("-") or long_name.startswith("-"):
            raise InvalidOptionFormatError("invalid option format, option cannot start with '-'")
        if len(short_name) != 1:
            raise InvalidOptionFormatError("short option can only have 1 character")
        if len(long_name) <= 1:
            raise InvalidOptionFormatError("long option must be longer than 1 character")
        return short_name, long_name

    if names.startswith("-"):
        raise InvalidOptionFormatError("option name cannot start with '-'")
    if len(names) <= 1:
        raise InvalidOptionFormatError("long option name required")
    return "", names


class Option:
    def __init__(self, names: str, description: str, required: bool = False):
        self.short_name, self.long_name = split_names(names)
        self.description = description
        self.required = required
        self.is_set = False

    @property
    def name(self) -> str:
        return self.long_name

    def matches(self, name: str) -> bool:
        return bool(name) and name in (self.long_name, self.short_name)

    def consume(self, tokens: List[str], position: int) -> int:
        """Apply the option found at ``tokens[position]``.

        Returns the index of the last token consumed.
        """
        raise NotImplementedError

    def __str__(self):
        return format_option(self)


class Switch(Option):
    def __init__(self, names: str, description: str, default: bool = False):
        super().__init__(names, description, required=False)
        self.is_set = default

    @property
    def value(self) -> bool:
        return self.is_set

    def consume(self, tokens: List[str], position: int) -> int:
        self.is_set = True
        return position


class ValueOption(Option):
    """An option followed by exactly one value token.

    ``value_type`` defaults to the type of ``default``, or ``str`` when no
    default is given. ``value`` holds the default until the option is parsed.
    """

    def __init__(self, names: str, description: str, default: Any = None,
                 value_type: Optional[type] = None, required: bool = False):
        super().__init__(names, description, required)
        if value_type is None:
            value_type = str if default is None else type(default)
        self.value_type = value_type
        self.value = default

    def consume(self, tokens: List[str], position: int) -> int:
        following = position + 1
        if following >= len(tokens) or not is_argument(tokens[following]):
            raise MissingArgumentError("missing option arguments, expected: 1 got: 0", tokens[position])

        self.value = coerce(self.value_type, tokens[following])
        self.is_set = True
        return following
