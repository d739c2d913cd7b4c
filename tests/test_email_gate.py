import pytest

from lostfound.utils.email_gate import is_institutional_email, require_institutional_email
from lostfound.utils.errors import ValidationFailed


@pytest.mark.parametrize(
    "email",
    ["alice@inst.edu", "Alice@INST.EDU", "  bob.smith@Inst.Edu  "],
)
def test_accepts_institutional_domain(email):
    assert is_institutional_email(email)


@pytest.mark.parametrize(
    "email",
    [None, "", "alice", "@inst.edu", "alice@gmail.com", "alice@inst.edu.evil.com", "alice@sub.inst.edu", "a@b@inst.edu", "alice@@inst.edu"],
)
def test_rejects_other_domains(email):
    assert not is_institutional_email(email)


def test_require_raises_validation_failed():
    with pytest.raises(ValidationFailed) as exc_info:
        require_institutional_email("mallory@example.com")

    assert exc_info.value.status_code == 400
    assert "@inst.edu" in exc_info.value.detail


def test_explicit_domain_override():
    assert is_institutional_email("carol@crimson.ua.edu", domain="crimson.ua.edu")
