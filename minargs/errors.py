class ArgumentError(RuntimeError):
    """
    Base class for every error raised by the argument parser.
    """

    pass


class InvalidKeyError(ArgumentError):
    """
    Raised when a flag or option key does not follow the key grammar.

    Attributes:
        key: The offending key.
    """

    key: str

    def __init__(self, key: str):
        super().__init__(f"Invalid flag: {key}")
        self.key = key


class MissingRequiredOptionError(ArgumentError):
    """
    Raised when a required option is not present or its value could not be parsed.

    Attributes:
        key: The primary form of the missing option.
    """

    key: str

    def __init__(self, key: str):
        super().__init__(f"missing required option '{key}'")
        self.key = key


class ValueParseError(ArgumentError):
    """
    Raised when a free-standing argument could not be converted.

    Attributes:
        value: The literal token that failed to parse.
    """

    value: str

    def __init__(self, value: str):
        super().__init__(f"failed to parse '{value}'")
        self.value = value
