class OptionException(Exception):
    def __init__(self, message: str, name: str = ""):
        super().__init__(message)
        self.message = message
        self.name = name

    def __str__(self):
        return self.message


class OptionParseException(OptionException):
    pass


class UnknownOption(OptionParseException):
    def __init__(self, name: str):
        super().__init__(f"unknown option '{name}'", name)


class MissingRequiredValue(OptionParseException):
    def __init__(self, name: str):
        super().__init__(f"option '{name}' requires a value", name)


class MissingRequiredOption(OptionParseException):
    def __init__(self, name: str):
        super().__init__(f"option '{name}' required", name)


class UndefinedKeyLookup(OptionException, KeyError):
    def __init__(self, name: str):
        super().__init__(f"no value for '{name}'", name)