import os
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import jwt

from hospital_inventory.config import get_settings
from hospital_inventory.core.exceptions import SessionError
from hospital_inventory.core.session import issue_session_token, validate_session

SECRET = "test-secret-with-enough-length-for-hs256"


class SessionValidatorTest(unittest.TestCase):
    def setUp(self):
        self._env = patch.dict(os.environ, {"JWT_SECRET": SECRET})
        self._env.start()
        get_settings.cache_clear()

    def tearDown(self):
        self._env.stop()
        get_settings.cache_clear()

    def test_bearer_token_resolves_identity(self):
        token = issue_session_token(4, "St. Mary General")
        identity = validate_session(f"Bearer {token}")
        self.assertEqual(identity.hospital_id, 4)
        self.assertEqual(identity.hospital_name, "St. Mary General")

    def test_cookie_is_used_without_header(self):
        token = issue_session_token(9, "Riverside Clinic")
        identity = validate_session(None, token)
        self.assertEqual(identity.hospital_id, 9)

    def test_missing_credentials(self):
        with self.assertRaises(SessionError) as ctx:
            validate_session(None, None)
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.message, "Unauthorized")

    def test_tampered_token(self):
        token = jwt.encode(
            {"sub": "1", "hospital_name": "X", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "some-other-secret-with-enough-length",
            algorithm="HS256",
        )
        with self.assertRaises(SessionError) as ctx:
            validate_session(f"Bearer {token}")
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.message, "Invalid session")

    def test_expired_token(self):
        token = issue_session_token(1, "St. Mary General", ttl=timedelta(seconds=-5))
        with self.assertRaises(SessionError) as ctx:
            validate_session(f"Bearer {token}")
        self.assertEqual(ctx.exception.message, "Session expired")

    def test_token_without_hospital_name(self):
        token = jwt.encode(
            {"sub": "1", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(SessionError) as ctx:
            validate_session(f"Bearer {token}")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_unconfigured_validator(self):
        token = issue_session_token(1, "St. Mary General")
        with patch.dict(os.environ, {"JWT_SECRET": ""}):
            get_settings.cache_clear()
            with self.assertRaises(SessionError) as ctx:
                validate_session(f"Bearer {token}")
        self.assertEqual(ctx.exception.status_code, 500)


if __name__ == "__main__":
    unittest.main()
