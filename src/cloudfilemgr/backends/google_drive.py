"""Simulated Google Drive backend."""

from __future__ import annotations

from cloudfilemgr.models import FileItem, ProviderType
from cloudfilemgr.util.mime import GOOGLE_FOLDER_MIME
from cloudfilemgr.util.time import ago, now_utc

from .base import InMemoryBackend


class GoogleDriveBackend(InMemoryBackend):
    provider = ProviderType.GOOGLE_DRIVE
    root_id = "gdrive_root"
    id_prefix = "gdrive_"
    folder_mime_type = GOOGLE_FOLDER_MIME
    download_prefix = "Mock file content for "

    def _seed_items(self) -> list[FileItem]:
        provider = self.provider
        return [
            FileItem(
                id=self.root_id,
                name="My Drive",
                is_folder=True,
                provider=provider,
                parent_id=None,
                path="/",
                modified_date=now_utc(),
                mime_type=GOOGLE_FOLDER_MIME,
            ),
            FileItem(
                id="gdrive_docs",
                name="Documents",
                is_folder=True,
                provider=provider,
                parent_id=self.root_id,
                path="/Documents",
                modified_date=ago(86400),
                mime_type=GOOGLE_FOLDER_MIME,
            ),
            FileItem(
                id="gdrive_photos",
                name="Photos",
                is_folder=True,
                provider=provider,
                parent_id=self.root_id,
                path="/Photos",
                modified_date=ago(172800),
                mime_type=GOOGLE_FOLDER_MIME,
            ),
            FileItem(
                id="gdrive_file1",
                name="Report.pdf",
                is_folder=False,
                provider=provider,
                parent_id="gdrive_docs",
                path="/Documents/Report.pdf",
                size=1024000,
                modified_date=ago(3600),
                mime_type="application/pdf",
            ),
            FileItem(
                id="gdrive_file2",
                name="Vacation.jpg",
                is_folder=False,
                provider=provider,
                parent_id="gdrive_photos",
                path="/Photos/Vacation.jpg",
                size=2048000,
                modified_date=ago(7200),
                mime_type="image/jpeg",
            ),
        ]
