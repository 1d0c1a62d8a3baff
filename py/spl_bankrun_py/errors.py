# spl_bankrun_py/errors.py

class TokenError(Exception):
    """Base class for errors raised while decoding token program state."""

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__doc__)


class TokenAccountNotFoundError(TokenError):
    """Account not found at the given address."""


class TokenInvalidAccountError(TokenError):
    """Account data is not a token account."""


class TokenInvalidAccountOwnerError(TokenError):
    """Account is not owned by the expected token program."""


class TokenInvalidAccountSizeError(TokenError):
    """Account data has an invalid length for this layout."""


class TokenInvalidMintError(TokenError):
    """Account data is not a mint."""


class TokenOwnerOffCurveError(TokenError):
    """Owner is a program derived address and off-curve owners were not allowed."""
