"""Declarative command-line option parsing."""
from .errors import (
    InvalidArgumentFormatError,
    InvalidOptionError,
    InvalidOptionFormatError,
    MissingArgumentError,
    OptionParsingError,
    UnexpectedArgumentError,
)
from .help import format_help, format_option
from .options import Option, Switch, ValueOption, split_names
from .parser import OptionAdder, Parser
from .positional import PositionalArg
from .values import coerce

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentFormatError",
    "InvalidOptionError",
    "InvalidOptionFormatError",
    "MissingArgumentError",
    "Option",
    "OptionAdder",
    "OptionParsingError",
    "Parser",
    "PositionalArg",
    "Switch",
    "UnexpectedArgumentError",
    "ValueOption",
    "coerce",
    "format_help",
    "format_option",
    "split_names",
]
