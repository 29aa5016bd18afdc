"""Pydantic models for API request/response schemas."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from leak_checker.core.outcomes import (
    ApiError,
    BreachRecord,
    Breaches,
    LookupOutcome,
    NoBreaches,
    ValidationError,
)


class LookupRequest(BaseModel):
    """Request body for the JSON lookup endpoint."""

    email: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def non_string_as_missing(cls, value: Any) -> Optional[str]:
        """Treat a non-string email as missing so it fails validation as an outcome."""
        return value if isinstance(value, str) else None


class BreachRecordModel(BaseModel):
    """One normalized breach record."""

    name: str
    title: str
    domain: str
    breach_date: str
    added_date: str
    modified_date: str
    pwn_count: int
    data_classes: List[str] = Field(default_factory=list)
    is_verified: bool
    description: str
    logo_path: Optional[str] = None

    @classmethod
    def from_record(cls, record: BreachRecord) -> "BreachRecordModel":
        return cls(
            name=record.name,
            title=record.title,
            domain=record.domain,
            breach_date=record.breach_date,
            added_date=record.added_date,
            modified_date=record.modified_date,
            pwn_count=record.pwn_count,
            data_classes=list(record.data_classes),
            is_verified=record.is_verified,
            description=record.description,
            logo_path=record.logo_path,
        )


class LookupResponse(BaseModel):
    """Response from the JSON lookup endpoint."""

    status: Literal["invalid", "error", "clean", "breached"]
    email: str = ""
    error_kind: Optional[str] = None
    message: Optional[str] = None
    breaches: List[BreachRecordModel] = Field(default_factory=list)

    @classmethod
    def from_outcome(cls, email: str, outcome: LookupOutcome) -> "LookupResponse":
        """Build the response body for a lookup outcome."""
        if isinstance(outcome, ValidationError):
            return cls(status="invalid", email=email, message=outcome.message)

        if isinstance(outcome, ApiError):
            return cls(
                status="error",
                email=email,
                error_kind=outcome.kind.value,
                message=outcome.message,
            )

        if isinstance(outcome, NoBreaches):
            return cls(status="clean", email=email)

        if isinstance(outcome, Breaches):
            return cls(
                status="breached",
                email=email,
                breaches=[BreachRecordModel.from_record(r) for r in outcome.records],
            )

        raise TypeError(f"Unknown lookup outcome: {type(outcome).__name__}")
