"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ValidationError(InterfaceError):
    """Request validation error.

    The message is safe to show to the client.
    """

    pass
