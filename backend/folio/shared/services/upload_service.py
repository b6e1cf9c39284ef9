"""
Upload Service

Stores uploaded images on local disk under a random name. The files are
served by the StaticFiles mount at UPLOAD_URL_PREFIX.

Usage:
======
    service = UploadService.from_settings(settings)
    url = await service.save(upload.filename, upload.file)   # "/uploads/3f2a....png"
"""

import asyncio
import os
import uuid
from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from folio.config.settings import Settings
from folio.shared.core.exceptions import ValidationError
from folio.shared.core.logging import get_logger


logger = get_logger(__name__)

_CHUNK_SIZE = 64 * 1024


class UploadService:
    """
    Attributes:
        upload_dir: Directory files are written to (created on demand)
        url_prefix: Public URL path of upload_dir
        max_bytes: Largest accepted file
        allowed_extensions: Lower-case extensions including the dot
    """

    def __init__(
        self,
        upload_dir: str,
        url_prefix: str = "/uploads",
        max_bytes: int = 5 * 1024 * 1024,
        allowed_extensions: Iterable[str] = (".jpg", ".jpeg", ".png", ".gif", ".webp"),
    ) -> None:
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_bytes = max_bytes
        self.allowed_extensions = {ext.lower() for ext in allowed_extensions}

    @classmethod
    def from_settings(cls, config: Settings) -> "UploadService":
        return cls(
            upload_dir=config.UPLOAD_DIR,
            url_prefix=config.UPLOAD_URL_PREFIX,
            max_bytes=config.MAX_UPLOAD_BYTES,
            allowed_extensions=config.ALLOWED_UPLOAD_EXTENSIONS,
        )

    def _extension(self, filename: Optional[str]) -> str:
        _, ext = os.path.splitext(filename or "")
        ext = ext.lower()
        if ext not in self.allowed_extensions:
            raise ValidationError(
                f"File type '{ext or 'none'}' is not allowed",
                details={"field": "file", "allowed": sorted(self.allowed_extensions)},
            )
        return ext

    def _write(self, source: BinaryIO, target: Path) -> int:
        """Copy source to target, giving up once max_bytes is exceeded."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        written = 0
        try:
            with open(target, "wb") as buffer:
                while True:
                    chunk = source.read(_CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise ValidationError(
                            f"File exceeds the {self.max_bytes} byte limit",
                            details={"field": "file"},
                        )
                    buffer.write(chunk)
        except Exception:
            target.unlink(missing_ok=True)
            raise
        return written

    async def save(self, filename: Optional[str], source: BinaryIO) -> str:
        """
        Store an uploaded file.

        Args:
            filename: Client-side name; only its extension is kept
            source: Readable binary stream

        Returns:
            Public URL of the stored file

        Raises:
            ValidationError: Disallowed extension or file too large
        """
        ext = self._extension(filename)
        name = f"{uuid.uuid4().hex}{ext}"
        size = await asyncio.to_thread(self._write, source, self.upload_dir / name)
        logger.info("File uploaded", stored_as=name, size=size)
        return f"{self.url_prefix}/{name}"
