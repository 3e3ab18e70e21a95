"""Tests for JWT token creation and verification."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import jwt
import pytest

from invoicer.config import env
from invoicer.exceptions import ConfigurationError
from invoicer.middleware.auth.dependencies import extract_token
from invoicer.middleware.auth.jwt import create_jwt_token, verify_jwt_token
from invoicer.security.audit_logger import SecurityAuditLogger, SecurityEventType


class TestCreateJwtToken:
  def test_round_trip_identity(self):
    token = create_jwt_token("user_123", "alice_tester")

    assert verify_jwt_token(token) == {"id": "user_123", "username": "alice_tester"}

  def test_claims(self):
    token = create_jwt_token("user_123", "alice_tester")
    payload = jwt.decode(token, env.JWT_SECRET_KEY, algorithms=["HS256"], issuer=env.JWT_ISSUER)

    assert payload["id"] == "user_123"
    assert payload["username"] == "alice_tester"
    assert payload["jti"]
    lifetime = payload["exp"] - payload["iat"]
    assert lifetime == int(timedelta(days=30).total_seconds())

  def test_unique_token_ids(self):
    first = jwt.decode(
      create_jwt_token("user_1", "alice_tester"),
      options={"verify_signature": False},
    )
    second = jwt.decode(
      create_jwt_token("user_1", "alice_tester"),
      options={"verify_signature": False},
    )
    assert first["jti"] != second["jti"]

  def test_missing_secret(self):
    with patch.object(env, "JWT_SECRET_KEY", ""):
      with pytest.raises(ConfigurationError):
        create_jwt_token("user_1", "alice_tester")


class TestVerifyJwtToken:
  def _encode(self, secret=None, **overrides):
    now = datetime.now(timezone.utc)
    payload = {
      "id": "user_1",
      "username": "alice_tester",
      "exp": now + timedelta(hours=1),
      "iat": now,
      "iss": env.JWT_ISSUER,
    }
    payload.update(overrides)
    return jwt.encode(payload, secret or env.JWT_SECRET_KEY, algorithm="HS256")

  def test_valid(self):
    assert verify_jwt_token(self._encode()) == {
      "id": "user_1",
      "username": "alice_tester",
    }

  def test_expired(self):
    past = datetime.now(timezone.utc) - timedelta(days=1)
    token = self._encode(exp=past, iat=past - timedelta(days=30))

    assert verify_jwt_token(token) is None

  def test_expired_is_audited(self):
    past = datetime.now(timezone.utc) - timedelta(days=1)
    token = self._encode(exp=past, iat=past - timedelta(days=30))

    with patch.object(SecurityAuditLogger, "log_security_event") as audit:
      verify_jwt_token(token)

    audit.assert_called_once()
    assert audit.call_args.kwargs["event_type"] is SecurityEventType.AUTH_TOKEN_EXPIRED

  def test_wrong_signature(self):
    token = self._encode(secret="another-signing-key-that-is-long-enough-123")

    assert verify_jwt_token(token) is None

  def test_wrong_issuer(self):
    assert verify_jwt_token(self._encode(iss="someone-else")) is None

  def test_missing_identity(self):
    assert verify_jwt_token(self._encode(username=None)) is None

  def test_malformed(self):
    assert verify_jwt_token("definitely-not-a-jwt") is None


class TestExtractToken:
  @pytest.mark.parametrize(
    "header,expected",
    [
      ("Bearer abc.def.ghi", "abc.def.ghi"),
      ("JWT abc.def.ghi", "abc.def.ghi"),
      ("bearer abc.def.ghi", "abc.def.ghi"),
      ("Basic dXNlcjpwYXNz", None),
      ("Bearer", None),
      ("", None),
      (None, None),
    ],
  )
  def test_schemes(self, header, expected):
    assert extract_token(header) == expected
