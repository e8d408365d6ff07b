"""Contact relay exceptions."""


class DispatchError(Exception):
    """Raised when a composed contact message could not be handed to the mail server."""
