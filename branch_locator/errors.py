"""
Errors raised by the branch lookup pipeline.

Every error carries a `user_message` that is safe to show to end users.
Raw resolver diagnostics stay in the exception chain and the logs.
"""


class BranchLookupError(Exception):
    """Base class for lookup failures."""
    user_message = "Could not look up a branch for this address."

    def __init__(self, message: str = None):
        super().__init__(message or self.user_message)


class CatalogError(BranchLookupError):
    """The catalog has no usable branch data."""
    user_message = "No branch data available."


class EmptyCatalogError(CatalogError):
    """The catalog is empty."""


class NoActiveBranchesError(CatalogError):
    """Every branch in the catalog is inactive."""
    user_message = "No branch is currently active."


class NoFallbackMatchError(BranchLookupError):
    """Neither tier produced a branch from the active catalog."""
    user_message = "No suitable branch found. Please include the province or city."


class FallbackTimeoutError(BranchLookupError):
    """The fallback resolver did not answer in time."""
    user_message = "The lookup took too long. Please try again."


class FallbackCancelledError(BranchLookupError):
    """The fallback call was cancelled before it answered."""
    user_message = "The lookup was cancelled. Please try again."


class FallbackResponseError(BranchLookupError):
    """The fallback resolver answered with something unusable."""
