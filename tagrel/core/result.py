"""Result type for explicit error handling.

Every pipeline stage returns ``Ok(value)`` or ``Err(error)`` instead of
raising, so the orchestrator can stop at the first failure and the CLI can
map the error to an exit code in one place.

Usage:
    match resolve_ref(os.environ, var="GITHUB_REF_NAME"):
        case Ok(ref):
            print(ref.component, ref.version)
        case Err(error):
            print(f"error: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E


Result = Ok[T] | Err[E]
