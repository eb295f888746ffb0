"""Tests for session token issuance and verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from friend.auth.tokens import InvalidToken, TokenService

SECRET = "unit-test-secret"  # noqa: S105


@pytest.fixture
def service() -> TokenService:
    return TokenService(SECRET)


def _tamper_signature(token: str) -> str:
    header, payload, signature = token.split(".")
    first = "A" if signature[0] != "A" else "B"
    return f"{header}.{payload}.{first}{signature[1:]}"


class TestIssue:
    def test_issue_and_verify(self, service: TokenService):
        token = service.issue(42)
        assert service.verify(token) == 42

    def test_claims(self, service: TokenService):
        now = datetime.now(timezone.utc).replace(microsecond=0)
        token = service.issue(7, now=now)
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["sub"] == "7"
        assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())

    def test_empty_secret_refused(self):
        with pytest.raises(ValueError, match="secret"):
            TokenService("")


class TestVerify:
    def test_expired_token_rejected(self, service: TokenService):
        token = service.issue(1, now=datetime.now(timezone.utc) - timedelta(days=8))
        with pytest.raises(InvalidToken, match="expired"):
            service.verify(token)

    def test_tampered_signature_rejected(self, service: TokenService):
        with pytest.raises(InvalidToken):
            service.verify(_tamper_signature(service.issue(1)))

    def test_other_key_rejected(self, service: TokenService):
        forged = TokenService("someone-elses-secret").issue(1)
        with pytest.raises(InvalidToken):
            service.verify(forged)

    def test_unsigned_token_rejected(self, service: TokenService):
        unsigned = jwt.encode(
            {"sub": "1", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
            key="",
            algorithm="none",
        )
        with pytest.raises(InvalidToken):
            service.verify(unsigned)

    def test_garbage_rejected(self, service: TokenService):
        with pytest.raises(InvalidToken):
            service.verify("not.a.token")

    def test_missing_subject_rejected(self, service: TokenService):
        token = jwt.encode({"exp": datetime.now(timezone.utc) + timedelta(days=1)}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            service.verify(token)

    def test_non_numeric_subject_rejected(self, service: TokenService):
        token = jwt.encode(
            {"sub": "alice", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken, match="user id"):
            service.verify(token)
