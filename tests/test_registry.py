import unittest
from unittest.mock import patch

from cloudfilemgr.backends import (
    DropboxBackend,
    GoogleDriveBackend,
    LatencyProfile,
    OneDriveBackend,
)
from cloudfilemgr.errors import InvalidOperationError, ProviderNotRegisteredError
from cloudfilemgr.models import ProviderType
from cloudfilemgr.registry import ProviderRegistry, default_registry


class TestProviderRegistry(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = ProviderRegistry.create_default(LatencyProfile.none())

    def test_default_registry_covers_three_providers(self) -> None:
        self.assertEqual(
            self.registry.provider_types(),
            [ProviderType.GOOGLE_DRIVE, ProviderType.DROPBOX, ProviderType.ONEDRIVE],
        )
        self.assertIsInstance(self.registry.resolve(ProviderType.GOOGLE_DRIVE), GoogleDriveBackend)
        self.assertIsInstance(self.registry.resolve(ProviderType.DROPBOX), DropboxBackend)
        self.assertIsInstance(self.registry.resolve(ProviderType.ONEDRIVE), OneDriveBackend)

    def test_resolve_returns_same_instance(self) -> None:
        a = self.registry.resolve(ProviderType.DROPBOX)
        b = self.registry.resolve(ProviderType.DROPBOX)
        self.assertIs(a, b)

    def test_icloud_is_not_registered(self) -> None:
        self.assertIsNone(self.registry.resolve(ProviderType.ICLOUD_DRIVE))
        self.assertFalse(self.registry.is_supported(ProviderType.ICLOUD_DRIVE))
        with self.assertRaises(ProviderNotRegisteredError) as ctx:
            self.registry.require(ProviderType.ICLOUD_DRIVE)
        self.assertEqual(ctx.exception.details["provider"], "iCloud Drive")

    def test_require_returns_backend(self) -> None:
        backend = self.registry.require(ProviderType.ONEDRIVE)
        self.assertIs(backend, self.registry.resolve(ProviderType.ONEDRIVE))

    def test_duplicate_provider_rejected(self) -> None:
        with self.assertRaises(InvalidOperationError):
            ProviderRegistry([DropboxBackend(), DropboxBackend()])

    def test_table_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.registry._backends[ProviderType.ICLOUD_DRIVE] = DropboxBackend()  # type: ignore[index]

    def test_backends_use_given_latency(self) -> None:
        backend = self.registry.require(ProviderType.GOOGLE_DRIVE)
        self.assertEqual(backend.latency, LatencyProfile.none())


class TestDefaultRegistry(unittest.TestCase):
    def setUp(self) -> None:
        default_registry.cache_clear()

    def tearDown(self) -> None:
        default_registry.cache_clear()

    def test_default_registry_is_shared(self) -> None:
        self.assertIs(default_registry(), default_registry())

    @patch.dict("os.environ", {"CLOUDFILEMGR_LATENCY_SCALE": "0"})
    def test_default_registry_reads_environment(self) -> None:
        backend = default_registry().require(ProviderType.DROPBOX)
        self.assertEqual(backend.latency, LatencyProfile.none())


if __name__ == "__main__":
    unittest.main()
