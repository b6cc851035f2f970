"""Exception hierarchy for an IMAP client, in the errors module."""

__version__ = "0.1.0"
__all__ = ["errors"]