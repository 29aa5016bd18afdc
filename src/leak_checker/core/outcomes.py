"""Lookup outcome types and the normalized breach record."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ApiErrorKind(str, Enum):
    """Classified failure kinds reported by a lookup."""

    BAD_REQUEST = "BadRequest"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    RATE_LIMITED = "RateLimited"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    NETWORK_ERROR = "NetworkError"
    UNEXPECTED_STATUS = "UnexpectedStatus"
    UNEXPECTED_BODY = "UnexpectedBody"
    CONFIG_ERROR = "ConfigError"


@dataclass(frozen=True)
class BreachRecord:
    """Normalized view of one breach returned for an account."""

    name: str = ""
    title: str = ""
    domain: str = ""
    breach_date: str = ""
    added_date: str = ""
    modified_date: str = ""
    pwn_count: int = 0
    data_classes: tuple[str, ...] = ()
    is_verified: bool = False
    # Raw upstream markup; escaping is the presenter's job.
    description: str = ""
    logo_path: Optional[str] = None

    @property
    def display_title(self) -> str:
        """Title for display, falling back to the breach name."""
        return self.title or self.name


@dataclass(frozen=True)
class Valid:
    """Input accepted by the validator."""

    email: str


@dataclass(frozen=True)
class ValidationError:
    """Submitted text is not a usable email address."""

    message: str


@dataclass(frozen=True)
class ApiError:
    """The lookup failed before or while talking to the breach API."""

    kind: ApiErrorKind
    message: str


@dataclass(frozen=True)
class NoBreaches:
    """The account appears in no known breach."""


@dataclass(frozen=True)
class Breaches:
    """The account appears in one or more breaches, in upstream order."""

    records: tuple[BreachRecord, ...]

    def __len__(self) -> int:
        return len(self.records)

    @property
    def total_pwn_count(self) -> int:
        """Sum of accounts exposed across all listed breaches."""
        return sum(r.pwn_count for r in self.records)


LookupOutcome = Union[ValidationError, ApiError, NoBreaches, Breaches]


def outcome_tag(outcome: LookupOutcome) -> str:
    """Short label for an outcome, safe to log."""
    if isinstance(outcome, ApiError):
        return f"ApiError:{outcome.kind.value}"
    return type(outcome).__name__
