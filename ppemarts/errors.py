# Filename: ppemarts/errors.py


class InvalidInputError(ValueError):
    """Caller-supplied data was rejected; the message is safe to show to users."""
