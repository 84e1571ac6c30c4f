"""Simulated Dropbox backend."""

from __future__ import annotations

from cloudfilemgr.models import FileItem, ProviderType
from cloudfilemgr.util.mime import GENERIC_FOLDER_MIME
from cloudfilemgr.util.time import ago, now_utc

from .base import InMemoryBackend


class DropboxBackend(InMemoryBackend):
    provider = ProviderType.DROPBOX
    root_id = "dbx_root"
    id_prefix = "dbx_"
    folder_mime_type = GENERIC_FOLDER_MIME
    download_prefix = "Mock Dropbox content for "

    def _seed_items(self) -> list[FileItem]:
        return [
            FileItem(
                id=self.root_id,
                name="Dropbox",
                is_folder=True,
                provider=self.provider,
                parent_id=None,
                path="/",
                modified_date=now_utc(),
                mime_type=GENERIC_FOLDER_MIME,
            ),
            FileItem(
                id="dbx_work",
                name="Work",
                is_folder=True,
                provider=self.provider,
                parent_id=self.root_id,
                path="/Work",
                modified_date=ago(86400),
                mime_type=GENERIC_FOLDER_MIME,
            ),
            FileItem(
                id="dbx_file1",
                name="Presentation.pdf",
                is_folder=False,
                provider=self.provider,
                parent_id="dbx_work",
                path="/Work/Presentation.pdf",
                size=3072000,
                modified_date=ago(3600),
                mime_type="application/pdf",
            ),
        ]
