"""Unit tests for user operations over a mocked store."""

import unittest
from unittest.mock import MagicMock

from pydantic import ValidationError

from app.core.errors import BadRequestError, NotFoundError
from app.schemas.users import UserCreate, UserDelete, UserUpdate, parse_identifier
from app.services.users import (
    build_update_fields,
    delete_user,
    list_users,
    register_user,
    update_user,
)
from app.store import InMemoryUserStore

USER_ID = "3f2b8c1e9a7d4e6f8b0c1d2e3f4a5b6c"


class TestParseIdentifier(unittest.TestCase):
    def test_accepts_hex_and_uuid_forms(self) -> None:
        hyphenated = "3f2b8c1e-9a7d-4e6f-8b0c-1d2e3f4a5b6c"
        for raw in (USER_ID, hyphenated, hyphenated.upper(), "{" + hyphenated + "}", f"  {USER_ID} "):
            with self.subTest(raw=raw):
                self.assertEqual(parse_identifier(raw), USER_ID)

    def test_rejects_malformed(self) -> None:
        for raw in ("", "   ", "abc", USER_ID + "00", "g" * 32, None, 12):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    parse_identifier(raw)


class TestSchemas(unittest.TestCase):
    def test_update_accepts_form_aliases(self) -> None:
        payload = UserUpdate.model_validate(
            {"userID": USER_ID, "newUsername": " Alicia ", "newEmail": ""}
        )
        self.assertEqual(payload.id, USER_ID)
        self.assertEqual(payload.name, "Alicia")
        self.assertIsNone(payload.email)
        self.assertIsNone(payload.password)

    def test_update_ignores_unlisted_password_names(self) -> None:
        payload = UserUpdate.model_validate({"id": USER_ID, "newPassword": "pw"})
        self.assertIsNone(payload.password)
        payload = UserUpdate.model_validate({"id": USER_ID, "password": "pw"})
        self.assertEqual(payload.password, "pw")

    def test_delete_requires_id(self) -> None:
        with self.assertRaises(ValidationError):
            UserDelete.model_validate({})

    def test_create_requires_password(self) -> None:
        with self.assertRaises(ValidationError):
            UserCreate.model_validate({"name": "Alice", "password": ""})


class TestRegisterUser(unittest.TestCase):
    def test_stores_hash_not_password(self) -> None:
        store = MagicMock()
        store.create.return_value = USER_ID
        identifier = register_user(
            store, UserCreate(name="Alice", email="a@x.com", password="secret1"), rounds=4
        )
        self.assertEqual(identifier, USER_ID)
        (fields,), _ = store.create.call_args
        self.assertEqual(fields["name"], "Alice")
        self.assertEqual(fields["email"], "a@x.com")
        self.assertNotEqual(fields["password_hash"], "secret1")
        self.assertNotIn("password", fields)
        self.assertIsNotNone(fields["created_at"].tzinfo)


class TestListUsers(unittest.TestCase):
    def test_omits_password_hash(self) -> None:
        store = InMemoryUserStore()
        store.create({"name": "Alice", "email": None, "password_hash": "h"})
        (user,) = list_users(store)
        self.assertEqual(user.name, "Alice")
        self.assertNotIn("password_hash", user.model_dump())


class TestUpdateUser(unittest.TestCase):
    def test_only_provided_fields(self) -> None:
        fields = build_update_fields(UserUpdate(id=USER_ID, email="new@x.com"), rounds=4)
        self.assertEqual(fields, {"email": "new@x.com"})

    def test_password_becomes_hash(self) -> None:
        fields = build_update_fields(UserUpdate(id=USER_ID, password="pw"), rounds=4)
        self.assertEqual(set(fields), {"password_hash"})
        self.assertNotEqual(fields["password_hash"], "pw")

    def test_empty_update_is_bad_request(self) -> None:
        store = MagicMock()
        with self.assertRaises(BadRequestError):
            update_user(store, UserUpdate(id=USER_ID), rounds=4)
        store.update_by_id.assert_not_called()

    def test_zero_matched_is_not_found(self) -> None:
        store = MagicMock()
        store.update_by_id.return_value = 0
        with self.assertRaises(NotFoundError):
            update_user(store, UserUpdate(id=USER_ID, name="X"), rounds=4)
        store.update_by_id.assert_called_once_with(USER_ID, {"name": "X"})


class TestDeleteUser(unittest.TestCase):
    def test_deleted(self) -> None:
        store = MagicMock()
        store.delete_by_id.return_value = 1
        delete_user(store, USER_ID)
        store.delete_by_id.assert_called_once_with(USER_ID)

    def test_zero_deleted_is_not_found(self) -> None:
        store = MagicMock()
        store.delete_by_id.return_value = 0
        with self.assertRaises(NotFoundError):
            delete_user(store, USER_ID)
