"""API tests for /api/contacts: ownership, partial updates, validation."""

import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from contactkeeper.models import Contact
from tests.api_case import ApiTestCase


class ContactsTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers(email="owner@example.com")

    def add(self, headers: dict[str, str] | None = None, **body: str) -> dict:
        payload = {"name": "Jill Johnson", "email": "jill@example.com", "phone": "111-111-1111"}
        payload.update(body)
        response = self.client.post("/api/contacts", json=payload, headers=headers or self.headers)
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()


class TestContactsRequireAuth(ContactsTestCase):
    def test_every_route_rejects_anonymous(self) -> None:
        calls = [
            ("GET", "/api/contacts"),
            ("POST", "/api/contacts"),
            ("PUT", "/api/contacts/1"),
            ("DELETE", "/api/contacts/1"),
        ]
        for method, path in calls:
            with self.subTest(method=method):
                response = self.client.request(method, path, json={"name": "x"})
                self.assertEqual(response.status_code, 401)
                self.assertEqual(response.json(), {"msg": "No token, authorization denied"})


class TestCreateAndList(ContactsTestCase):
    def test_create_defaults_to_personal(self) -> None:
        contact = self.add()
        self.assertEqual(contact["name"], "Jill Johnson")
        self.assertEqual(contact["type"], "personal")
        self.assertIsNotNone(contact["id"])

    def test_list_newest_first_and_only_own(self) -> None:
        first = self.add(name="First")
        second = self.add(name="Second", type="professional")
        other_headers = self.auth_headers(email="stranger@example.com")
        self.add(headers=other_headers, name="Not Yours")

        response = self.client.get("/api/contacts", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        ids = [c["id"] for c in response.json()]
        self.assertEqual(ids, [second["id"], first["id"]])

    def test_name_required(self) -> None:
        response = self.client.post("/api/contacts", json={"name": " "}, headers=self.headers)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["errors"],
            [{"msg": "Name is required", "param": "name", "location": "body"}],
        )

    def test_bad_type_and_email(self) -> None:
        response = self.client.post(
            "/api/contacts",
            json={"name": "Sam", "email": "nope", "type": "family"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)
        params = sorted(e["param"] for e in response.json()["errors"])
        self.assertEqual(params, ["email", "type"])

    def test_blank_email_stored_as_null(self) -> None:
        contact = self.add(email="")
        self.assertIsNone(contact["email"])


class TestContactsServerError(ContactsTestCase):
    """Database failures in contact routes become an opaque, logged 500."""

    def test_list_database_error(self) -> None:
        with patch(
            "contactkeeper.services.contacts.list_contacts",
            side_effect=OperationalError("SELECT", {}, Exception("db down at 10.0.0.5")),
        ):
            with self.assertLogs("contactkeeper.api.contacts", level="ERROR"):
                response = self.client.get("/api/contacts", headers=self.headers)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"msg": "Server error"})
        self.assertNotIn("10.0.0.5", response.text)

    def test_create_database_error(self) -> None:
        with patch(
            "contactkeeper.services.contacts.create_contact",
            side_effect=OperationalError("INSERT", {}, Exception("disk full")),
        ):
            with self.assertLogs("contactkeeper.api.contacts", level="ERROR"):
                response = self.client.post(
                    "/api/contacts", json={"name": "Sam"}, headers=self.headers
                )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"msg": "Server error"})


class TestUpdate(ContactsTestCase):
    def test_partial_update_keeps_other_fields(self) -> None:
        contact = self.add()
        response = self.client.put(
            f"/api/contacts/{contact['id']}",
            json={"phone": "222-222-2222"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["phone"], "222-222-2222")
        self.assertEqual(body["name"], "Jill Johnson")
        self.assertEqual(body["email"], "jill@example.com")

    def test_not_found(self) -> None:
        response = self.client.put(
            "/api/contacts/404", json={"name": "Nobody"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"msg": "Contact not found"})

    def test_other_users_contact(self) -> None:
        contact = self.add()
        intruder = self.auth_headers(email="intruder@example.com")
        response = self.client.put(
            f"/api/contacts/{contact['id']}", json={"name": "Hijacked"}, headers=intruder
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"msg": "Not authorized"})

        db = self.session()
        try:
            self.assertEqual(db.get(Contact, contact["id"]).name, "Jill Johnson")
        finally:
            db.close()


class TestDelete(ContactsTestCase):
    def test_delete_own(self) -> None:
        contact = self.add()
        response = self.client.delete(f"/api/contacts/{contact['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"msg": "Contact removed"})
        listing = self.client.get("/api/contacts", headers=self.headers).json()
        self.assertEqual(listing, [])

    def test_delete_other_users_contact(self) -> None:
        contact = self.add()
        intruder = self.auth_headers(email="intruder@example.com")
        response = self.client.delete(f"/api/contacts/{contact['id']}", headers=intruder)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(len(self.client.get("/api/contacts", headers=self.headers).json()), 1)

    def test_delete_missing(self) -> None:
        response = self.client.delete("/api/contacts/12345", headers=self.headers)
        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
