"""Help text rendering for registered options and positional slots."""


def format_option(option) -> str:
    if not option.short_name:
        return f"--{option.long_name}, {option.long_name.upper()}\t{option.description}"
    return f"-{option.short_name}, --{option.long_name}\t{option.description}"


def format_positional(index: int, slot) -> str:
    return f"arg{index}\t{slot.description}"


def format_usage(parser) -> str:
    usage = "Usage:\n  " + parser.program + " [OPTION...]"
    for index in range(1, len(parser.positionals) + 1):
        usage += f" arg{index}"
    return usage + "\n\n"


def format_help(parser) -> str:
    result = ""
    if parser.description:
        result += parser.description + "\n"
    if parser.program:
        result += format_usage(parser)

    result += "optional arguments:\n"
    for option in parser.options:
        result += format_option(option) + "\n"

    if parser.positionals:
        result += "positional arguments:\n"
        for index, slot in enumerate(parser.positionals, start=1):
            result += format_positional(index, slot) + "\n"

    return result
