"""Customer contact details as value objects."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from backoffice.domain import backoffice

CONTACT_NUMBER_PATTERN = re.compile(r"^[0-9]{10,15}$")

_FORBIDDEN_EMAIL_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def email_problem(email: str) -> str | None:
    """Return why ``email`` is not a usable address, or None when it is."""
    if any(ch in email for ch in (" ", "\t", "\n")):
        return "Email address must not contain whitespace"

    if email.count("@") != 1:
        return "Email address must contain exactly one @"

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return "Email address has an invalid local part"

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return "Email address has an invalid domain"

    if "." not in domain_part:
        return "Email address domain must contain a dot"

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            return "Email address domain labels must not start or end with a hyphen"

    if ".." in local_part or ".." in domain_part:
        return "Email address must not contain consecutive dots"

    for forbidden in _FORBIDDEN_EMAIL_CHARACTERS:
        if forbidden in email:
            return f"Email address must not contain {forbidden!r}"

    return None


@backoffice.value_object
class EmailAddress:
    """A structurally valid email address.

    Exactly one @, non-empty local and domain parts, a dotted domain without
    leading or trailing hyphens in its labels, no consecutive dots, no
    whitespace and no forbidden characters. Errors are reported under the
    ``email`` key, the name customers know the field by.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        problem = email_problem(self.address)
        if problem:
            raise ValidationError({"email": [problem]})


@backoffice.value_object
class ContactNumber:
    """A phone number made of 10 to 15 digits, nothing else."""

    digits: String(required=True, max_length=15)

    @invariant.post
    def verify_contact_number(self):
        if not CONTACT_NUMBER_PATTERN.match(self.digits):
            raise ValidationError({"contact_number": ["Contact number must be 10 to 15 digits"]})
