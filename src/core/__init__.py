"""Shared kernel: Result values, error values, error codes.

Settings (``src.core.config``) and the dependency container
(``src.core.container``) also live here but are not re-exported, so importing
the kernel never reads the environment or wires adapters.
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
