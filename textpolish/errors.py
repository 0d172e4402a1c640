"""Exceptions raised by textpolish."""


class TextPolishError(Exception):
    """Base class for every error that should end the program."""


class ConfigError(TextPolishError):
    pass


class LanguageError(TextPolishError):
    pass


class InputError(TextPolishError):
    pass


class APIError(TextPolishError):
    pass


class ClipboardError(TextPolishError):
    pass
