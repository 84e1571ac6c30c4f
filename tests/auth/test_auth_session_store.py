import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from cloudfilemgr.auth import AuthSessionStore, JsonFileStorage, KeyringStorage, MemoryStorage
from cloudfilemgr.errors import OperationFailedError
from cloudfilemgr.models import ConnectedProvider, ProviderType
from cloudfilemgr.settings import Settings


class FailingStorage(MemoryStorage):
    def get(self, key: str):
        raise OperationFailedError("keyring read failed")


class TestAuthSessionStore(unittest.TestCase):
    def setUp(self) -> None:
        self.storage = MemoryStorage()
        self.store = AuthSessionStore(self.storage)

    def _provider(self, provider_type: ProviderType, provider_id: str) -> ConnectedProvider:
        return ConnectedProvider(
            type=provider_type,
            id=provider_id,
            is_connected=True,
            account_email="user@example.com",
        )

    def test_empty_storage_loads_empty_list(self) -> None:
        self.assertEqual(self.store.load(), [])

    def test_save_then_load(self) -> None:
        providers = [
            self._provider(ProviderType.GOOGLE_DRIVE, "a"),
            self._provider(ProviderType.DROPBOX, "b"),
        ]
        self.store.save(providers)
        self.assertEqual(self.store.load(), providers)

    def test_resave_is_byte_identical(self) -> None:
        self.store.save([self._provider(ProviderType.ONEDRIVE, "x")])
        first = self.storage.get("connected_providers")

        self.store.save(self.store.load())
        self.assertEqual(self.storage.get("connected_providers"), first)

    def test_saved_layout(self) -> None:
        self.store.save([self._provider(ProviderType.DROPBOX, "b")])
        data = json.loads(self.storage.get("connected_providers"))
        self.assertEqual(
            data,
            [
                {
                    "id": "b",
                    "type": "Dropbox",
                    "displayName": "Dropbox",
                    "isConnected": True,
                    "accountEmail": "user@example.com",
                }
            ],
        )

    def test_corrupt_data_loads_empty_list(self) -> None:
        for raw in ("not json", '{"id": "x"}', '[{"id": "x", "type": "Box"}]'):
            with self.subTest(raw=raw):
                self.storage.set("connected_providers", raw)
                with self.assertLogs("cloudfilemgr.auth.session_store", level="WARNING"):
                    self.assertEqual(self.store.load(), [])

    def test_one_malformed_record_discards_all(self) -> None:
        good = self._provider(ProviderType.DROPBOX, "b").to_dict()
        self.storage.set("connected_providers", json.dumps([good, {"type": "Dropbox"}]))
        with self.assertLogs("cloudfilemgr.auth.session_store", level="WARNING"):
            self.assertEqual(self.store.load(), [])

    def test_storage_failure_loads_empty_list(self) -> None:
        store = AuthSessionStore(FailingStorage())
        with self.assertLogs("cloudfilemgr.auth.session_store", level="WARNING"):
            self.assertEqual(store.load(), [])

    def test_add_connection_is_unique_by_id(self) -> None:
        p = self._provider(ProviderType.DROPBOX, "b")
        self.assertTrue(self.store.add_connection(p))
        self.assertFalse(self.store.add_connection(p))
        self.assertEqual([x.id for x in self.store.load()], ["b"])

    def test_same_type_may_appear_twice(self) -> None:
        self.store.add_connection(self._provider(ProviderType.DROPBOX, "b1"))
        self.store.add_connection(self._provider(ProviderType.DROPBOX, "b2"))
        self.assertEqual([x.id for x in self.store.load()], ["b1", "b2"])

    def test_remove_connection(self) -> None:
        a = self._provider(ProviderType.GOOGLE_DRIVE, "a")
        b = self._provider(ProviderType.DROPBOX, "b")
        self.store.save([a, b])

        self.assertTrue(self.store.remove_connection(a))
        self.assertFalse(self.store.remove_connection(a))
        self.assertEqual(self.store.load(), [b])

    def test_clear(self) -> None:
        self.store.save([self._provider(ProviderType.DROPBOX, "b")])
        self.store.clear()
        self.assertIsNone(self.storage.get("connected_providers"))
        self.assertEqual(self.store.load(), [])

    def test_custom_key(self) -> None:
        store = AuthSessionStore(self.storage, key="other")
        store.save([self._provider(ProviderType.DROPBOX, "b")])
        self.assertIsNone(self.storage.get("connected_providers"))
        self.assertIsNotNone(self.storage.get("other"))


class TestAuthSessionStoreFromSettings(unittest.TestCase):
    def test_store_path_selects_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "store.json"
            store = AuthSessionStore.from_settings(Settings(store_path=str(path)))
            self.assertIsInstance(store._storage, JsonFileStorage)

            store.add_connection(ConnectedProvider(type=ProviderType.ONEDRIVE, id="o"))
            reopened = AuthSessionStore.from_settings(Settings(store_path=str(path)))
            self.assertEqual([p.id for p in reopened.load()], ["o"])

    @patch("cloudfilemgr.auth.storage.keyring")
    def test_default_selects_keyring(self, mock_keyring) -> None:
        mock_keyring.get_password.return_value = None
        store = AuthSessionStore.from_settings(Settings())
        self.assertIsInstance(store._storage, KeyringStorage)

        self.assertEqual(store.load(), [])
        mock_keyring.get_password.assert_called_once_with("cloudfilemgr", "connected_providers")


if __name__ == "__main__":
    unittest.main()
