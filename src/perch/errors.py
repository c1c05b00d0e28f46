"""Perch exception hierarchy.

Shared across discovery, segment collection, and the CLI so every module
raises and catches the same types.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class InvariantError(PerchError):
    """Raised when an upstream structural guarantee is violated.

    Signals a defect in perch or one of its collaborators, never a problem
    with the user's app.  Not meant to be caught and retried.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"Invariant: {message}. This is a bug in perch.")


class ConfigurationError(PerchError):
    """Raised when an app directory or route module is misconfigured.

    User-correctable: the message points at the file or route to fix.
    """


class SegmentConfigError(ConfigurationError):
    """A route segment declared an invalid or inconsistent configuration.

    Raised by the segment config parser and by ``attach()``.  The message
    always names the route so build output points at the offending page.
    """

    def __init__(self, route: str, detail: str) -> None:
        self.route = route
        self.detail = detail
        super().__init__(f"Invalid segment configuration for route {route!r}: {detail}")
