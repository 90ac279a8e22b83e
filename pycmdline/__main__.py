import sys
from typing import Optional, Sequence

from .errors import OptionParsingError
from .options import Switch, ValueOption
from .parser import Parser
from .positional import PositionalArg


def main(argv: Optional[Sequence[str]] = None) -> int:
    host = ValueOption("H,host", "server host name", default="127.0.0.1")
    long_option = Switch("abc", "long option", default=True)
    unused = Switch("unused", "unused option")
    arg1 = PositionalArg(str, "argument 1")
    arg2 = PositionalArg(str, "argument 2")

    parser = Parser("pycmdline", "Example program help string")
    for item in (host, long_option, unused, arg1, arg2):
        parser.add(item)

    try:
        parser.parse(argv)
    except OptionParsingError as e:
        print(e, file=sys.stderr)
        return 1

    if parser.is_help_selected():
        print(parser.help(), end="")
        return 0

    print(f"host: {host.value}")
    print(f"abc: {long_option.is_set}")
    print(f"unused: {unused.is_set}")
    print(f"arg1: {arg1.value}")
    print(f"arg2: {arg2.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
