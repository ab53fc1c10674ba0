import re

from app.lib.contact_models import SubmissionRequest, ValidationErrors

MAX_FIELD_LENGTH = 512

# local@domain.tld: one "@", at least one domain label, final label of 2+ chars
EMAIL_PATTERN = re.compile(r"[^@\s]+@(?:[^@\s.]+\.)+[^@\s.]{2,}")

EMAIL_INVALID = "Please enter a valid email address."
EMAIL_TOO_LONG = f"Your email address must be {MAX_FIELD_LENGTH} characters or fewer."
MESSAGE_MISSING = "Please enter a message."
MESSAGE_TOO_LONG = f"Your message must be {MAX_FIELD_LENGTH} characters or fewer."


def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def validate(request: SubmissionRequest) -> ValidationErrors:
    """
    Check the user-supplied fields of a submission.
    Returns field -> message for every failing field; an empty dict means valid.
    Over-long values are rejected, never truncated.
    """
    errors: ValidationErrors = {}

    email = request.email or ""
    if len(email) > MAX_FIELD_LENGTH:
        errors["email"] = EMAIL_TOO_LONG
    elif not is_valid_email(email):
        errors["email"] = EMAIL_INVALID

    message = request.message or ""
    if len(message) > MAX_FIELD_LENGTH:
        errors["message"] = MESSAGE_TOO_LONG
    elif not message.strip():
        errors["message"] = MESSAGE_MISSING

    return errors
