"""Simulated OneDrive backend."""

from __future__ import annotations

from cloudfilemgr.models import FileItem, ProviderType
from cloudfilemgr.util.mime import GENERIC_FOLDER_MIME
from cloudfilemgr.util.time import ago, now_utc

from .base import InMemoryBackend


class OneDriveBackend(InMemoryBackend):
    provider = ProviderType.ONEDRIVE
    root_id = "od_root"
    id_prefix = "od_"
    folder_mime_type = GENERIC_FOLDER_MIME
    download_prefix = "Mock OneDrive content for "

    def _seed_items(self) -> list[FileItem]:
        return [
            FileItem(
                id=self.root_id,
                name="OneDrive",
                is_folder=True,
                provider=self.provider,
                parent_id=None,
                path="/",
                modified_date=now_utc(),
                mime_type=GENERIC_FOLDER_MIME,
            ),
            FileItem(
                id="od_personal",
                name="Personal",
                is_folder=True,
                provider=self.provider,
                parent_id=self.root_id,
                path="/Personal",
                modified_date=ago(86400),
                mime_type=GENERIC_FOLDER_MIME,
            ),
            FileItem(
                id="od_file1",
                name="Notes.txt",
                is_folder=False,
                provider=self.provider,
                parent_id="od_personal",
                path="/Personal/Notes.txt",
                size=512000,
                modified_date=ago(3600),
                mime_type="text/plain",
            ),
        ]
