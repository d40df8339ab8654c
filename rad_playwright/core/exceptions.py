"""Custom exceptions for the RAD Playwright page objects."""


class InvalidArgumentError(ValueError):
    """Raised when an argument is missing or unusable, before any browser call."""

    def __init__(self, param_name: str, message: str = None):
        self.param_name = param_name
        super().__init__(message or f"'{param_name}' cannot be None.")


class UnknownAppError(KeyError):
    """Raised when a low-code app name is not in the app ID registry."""

    def __init__(self, name: str, known_names):
        self.name = name
        self.known_names = sorted(known_names)
        super().__init__(f"Unknown low-code app '{name}'. Known apps: {', '.join(self.known_names)}")

    def __str__(self) -> str:
        return self.args[0]
