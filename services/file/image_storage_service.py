import asyncio
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IncomingImage:
    field_name: str
    original_name: str
    content: bytes


class ImageStorageService:
    """Writes uploaded product images to the upload directory served under /images."""

    def __init__(self, upload_dir: str, public_base_url: str) -> None:
        self._upload_dir = Path(upload_dir).resolve()
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        self._public_base_url = public_base_url.rstrip("/")

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    async def store_images(self, images: List[IncomingImage]) -> List[str]:
        loop = asyncio.get_event_loop()
        urls: List[str] = []
        for image in images:
            path = await loop.run_in_executor(
                None, self._write_new_file, image.field_name, image.original_name, image.content
            )
            logger.info("Stored uploaded image %s (%s bytes)", path.name, len(image.content))
            urls.append(self.public_url(path.name))
        return urls

    def public_url(self, filename: str) -> str:
        return f"{self._public_base_url}/images/{filename}"

    def _write_new_file(self, field_name: str, original_name: str, content: bytes) -> Path:
        """Create ``<field>_<ms><ext>``; a name already taken bumps the timestamp."""
        extension = Path(original_name or "").suffix
        timestamp = int(time.time() * 1000)
        while True:
            path = self._upload_dir / f"{field_name}_{timestamp}{extension}"
            try:
                # "x" fails instead of overwriting when another upload claimed the name
                with open(path, "xb") as file:
                    file.write(content)
            except FileExistsError:
                timestamp += 1
                continue
            return path
