from typing import Optional

from lostfound.config import INSTITUTION_EMAIL_DOMAIN
from lostfound.utils.errors import ValidationFailed


def is_institutional_email(email: Optional[str], domain: str = INSTITUTION_EMAIL_DOMAIN) -> bool:
    if not email or email.count("@") != 1:
        return False

    local, _, email_domain = email.strip().rpartition("@")
    if not local:
        return False

    return email_domain.lower() == domain.lower()


def require_institutional_email(email: Optional[str]):
    if not is_institutional_email(email):
        raise ValidationFailed(f"Only @{INSTITUTION_EMAIL_DOMAIN} email addresses are allowed.")
