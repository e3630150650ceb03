"""Tests for the create_user command-line script."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from contactkeeper.models import User
from contactkeeper.scripts import create_user
from tests.api_case import ApiTestCase


class TestCreateUserScript(ApiTestCase):
    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with patch.object(create_user, "SessionLocal", self.SessionTesting):
            with redirect_stdout(out), redirect_stderr(err):
                code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_user(self) -> None:
        code, out, _ = self._run("Ada", "ada@example.com", "s3cretpass")
        self.assertEqual(code, 0)
        self.assertIn("ada@example.com", out)
        db = self.session()
        try:
            self.assertEqual(db.query(User).count(), 1)
        finally:
            db.close()

    def test_rejects_short_password(self) -> None:
        code, _, err = self._run("Ada", "ada@example.com", "short")
        self.assertEqual(code, 1)
        self.assertIn("password: Please include a password with minimum 8 chars", err)

    def test_duplicate(self) -> None:
        self._run("Ada", "ada@example.com", "s3cretpass")
        code, _, err = self._run("Ada", "ada@example.com", "s3cretpass")
        self.assertEqual(code, 1)
        self.assertIn("User already exists!", err)


if __name__ == "__main__":
    unittest.main()
