import logging
import sys
from collections import deque
from typing import Deque, List, Optional, Sequence, Tuple, Union

from .errors import MissingArgumentError, InvalidOptionError, UnexpectedArgumentError
from .help import format_help
from .options import Option, Switch, ValueOption
from .positional import PositionalArg

logger = logging.getLogger(__name__)

HELP_NAMES = "h,help"
HELP_DESCRIPTION = "display this help message"


def is_long_option(token: str) -> bool:
    return token.startswith("--")


def is_short_option(token: str) -> bool:
    return token.startswith("-")


class Parser:
    """Dispatches an argument vector onto registered definitions.

    Definitions are mutated in place; callers keep their own references and
    read ``value`` / ``is_set`` back after :meth:`parse`. Option state is
    never reset between calls, so a second parse only overwrites what it
    matches. Positional slots are unbound at the start of every parse.
    """

    def __init__(self, program: Optional[str] = None, description: str = "",
                 enforce_required: bool = False):
        self.program = program
        self.description = description
        self.enforce_required = enforce_required
        self._options: List[Option] = []
        self._positionals: List[PositionalArg] = []
        self._help = self.add_option(Switch(HELP_NAMES, HELP_DESCRIPTION))

    @property
    def options(self) -> Tuple[Option, ...]:
        return tuple(self._options)

    @property
    def positionals(self) -> Tuple[PositionalArg, ...]:
        return tuple(self._positionals)

    def add(self, item: Union[Option, PositionalArg]) -> Union[Option, PositionalArg]:
        if isinstance(item, Option):
            return self.add_option(item)
        if isinstance(item, PositionalArg):
            return self.add_positional(item)
        raise TypeError(f"cannot register {type(item).__name__}, expected Option or PositionalArg")

    def add_option(self, option: Option) -> Option:
        self._options.append(option)
        return option

    def add_positional(self, slot: PositionalArg) -> PositionalArg:
        self._positionals.append(slot)
        return slot

    def add_options(self) -> "OptionAdder":
        return OptionAdder(self)

    def get(self, name: str) -> Optional[Option]:
        for option in self._options:
            if option.matches(name):
                return option
        return None

    def is_help_selected(self) -> bool:
        return self._help.is_set

    def parse(self, argv: Optional[Sequence[str]] = None) -> None:
        """Scan ``argv[1:]`` left to right; ``argv[0]`` is the program name."""
        tokens = list(sys.argv if argv is None else argv)
        pending: Deque[PositionalArg] = deque(self._positionals)
        for slot in pending:
            slot.unbind()

        position = 1
        while position < len(tokens):
            token = tokens[position]
            if is_long_option(token):
                position = self._dispatch(token, token[2:], tokens, position)
            elif is_short_option(token):
                position = self._dispatch(token, token[1:], tokens, position)
            elif pending:
                pending.popleft().consume(token)
                logger.debug("bound positional argument %d to %r",
                             len(self._positionals) - len(pending), token)
            else:
                raise UnexpectedArgumentError(token)
            position += 1

        if self.is_help_selected():
            logger.debug("help selected, skipping argument checks")
            return

        if pending:
            expected = len(self._positionals)
            raise MissingArgumentError(
                f"missing positional arguments, expected: {expected} got: {expected - len(pending)}")

        if self.enforce_required:
            for option in self._options:
                if option.required and not option.is_set:
                    raise MissingArgumentError(f"missing required option --{option.long_name}")

    def _dispatch(self, token: str, name: str, tokens: List[str], position: int) -> int:
        option = self.get(name)
        if option is None:
            raise InvalidOptionError(token)
        logger.debug("matched %r to option --%s", token, option.long_name)
        return option.consume(tokens, position)

    def help(self) -> str:
        return format_help(self)

    def __str__(self):
        return format_help(self)


class OptionAdder:
    """Chainable registration: ``parser.add_options()("v,verbose", "chatty")``.

    A call with neither ``value_type`` nor a non-bool ``default`` creates a
    :class:`Switch`; anything else creates a :class:`ValueOption`. Created
    options belong to the parser and are looked up with :meth:`Parser.get`.
    Switches are never required, so ``required=True`` needs a value option.
    """

    def __init__(self, parser: Parser):
        self.parser = parser

    def __call__(self, names: str, description: str, default=None,
                 value_type: Optional[type] = None, required: bool = False) -> "OptionAdder":
        if value_type is None and (default is None or isinstance(default, bool)):
            if required:
                raise TypeError(f"switch '{names}' cannot be required, give a value_type or default")
            self.parser.add_option(Switch(names, description, bool(default)))
        else:
            self.parser.add_option(ValueOption(names, description, default, value_type, required))
        return self
