"""Base exceptions for modcheck domain."""


class ModCheckError(Exception):
    """Root exception for all modcheck errors.

    All domain exceptions inherit from this.
    Allows catching all modcheck-specific errors.
    """
