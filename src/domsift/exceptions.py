"""
Domsift Exceptions.

Centralized exception hierarchy for the package.
"""

class DomsiftError(Exception):
    """Base exception for all Domsift errors."""
    pass


class ParseError(DomsiftError):
    """Raised when strict parsing rejects the markup."""
    pass


class InvalidNodeError(DomsiftError, TypeError):
    """Raised when a query is given something that is not a Node."""
    pass


class SourceError(DomsiftError):
    """Raised when the CLI cannot read its input."""
    pass
