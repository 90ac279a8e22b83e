from typing import Optional


class OptionParsingError(Exception):
    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.token = token

    def __str__(self):
        return self.message


class InvalidOptionFormatError(OptionParsingError):
    pass


class InvalidOptionError(OptionParsingError):
    def __init__(self, token: str, message: Optional[str] = None):
        super().__init__(message or f"invalid option {token}", token)


class UnexpectedArgumentError(InvalidOptionError):
    def __init__(self, token: str):
        super().__init__(token, f"unexpected positional arguments found: {token}")


class MissingArgumentError(OptionParsingError):
    pass


class InvalidArgumentFormatError(OptionParsingError):
    def __init__(self, token: str):
        super().__init__(f"invalid argument format: {token}", token)
