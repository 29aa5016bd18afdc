"""Email address syntax validation."""

from typing import Optional, Union

import email_validator
from email_validator import EmailNotValidError, validate_email

from leak_checker.core.outcomes import Valid, ValidationError

INVALID_EMAIL_MESSAGE = "Please enter a valid email address."

# Reserved names such as .local and .test are well-formed; whether they can
# receive mail is not a syntax question.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def validate_email_input(raw: Optional[str]) -> Union[Valid, ValidationError]:
    """
    Check that the submitted text is a syntactically valid email address.

    Surrounding whitespace is trimmed. No DNS or mailbox checks are made.
    Quoted local parts and domain literals are accepted; domain names
    still need a period and a top-level label.

    Args:
        raw: The submitted text, possibly empty or missing

    Returns:
        Valid with the trimmed address, or ValidationError
    """
    value = (raw or "").strip()

    if not value:
        return ValidationError(INVALID_EMAIL_MESSAGE)

    try:
        validate_email(
            value,
            check_deliverability=False,
            allow_quoted_local=True,
            allow_domain_literal=True,
        )
    except EmailNotValidError:
        return ValidationError(INVALID_EMAIL_MESSAGE)

    return Valid(value)
