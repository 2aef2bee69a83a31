"""modcheck - post-parse decorator and modifier placement validator."""

__version__ = "0.1.0"

from modcheck.domain.exceptions import ModCheckError, PlacementError
from modcheck.presentation.api import create_validator, validate, validate_sync

__all__ = [
    "ModCheckError",
    "PlacementError",
    "create_validator",
    "validate",
    "validate_sync",
    "__version__",
]
