import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from services.file import image_storage_service
from services.file.image_storage_service import ImageStorageService, IncomingImage

FROZEN_NOW = 1_700_000_000.0


def test_images_are_named_by_field_and_timestamp(tmp_path, monkeypatch):
    monkeypatch.setattr(image_storage_service.time, "time", lambda: FROZEN_NOW)
    storage = ImageStorageService(str(tmp_path), "http://shop.test/")

    urls = asyncio.run(
        storage.store_images(
            [
                IncomingImage("product", "front.png", b"front"),
                IncomingImage("product", "back.jpg", b"back"),
            ]
        )
    )

    assert urls == [
        "http://shop.test/images/product_1700000000000.png",
        "http://shop.test/images/product_1700000000001.jpg",
    ]
    assert (tmp_path / "product_1700000000000.png").read_bytes() == b"front"
    assert (tmp_path / "product_1700000000001.jpg").read_bytes() == b"back"


def test_existing_file_is_never_overwritten(tmp_path, monkeypatch):
    monkeypatch.setattr(image_storage_service.time, "time", lambda: FROZEN_NOW)
    (tmp_path / "product_1700000000000.png").write_bytes(b"older")
    storage = ImageStorageService(str(tmp_path), "http://shop.test")

    [url] = asyncio.run(storage.store_images([IncomingImage("product", "new.png", b"newer")]))

    assert url.endswith("product_1700000000001.png")
    assert (tmp_path / "product_1700000000000.png").read_bytes() == b"older"


def test_concurrent_uploads_in_the_same_millisecond_keep_every_file(tmp_path, monkeypatch):
    monkeypatch.setattr(image_storage_service.time, "time", lambda: FROZEN_NOW)
    storage = ImageStorageService(str(tmp_path), "http://shop.test")
    uploads = 20

    async def workflow():
        return await asyncio.gather(
            *(
                storage.store_images([IncomingImage("product", "photo.png", f"image-{index}".encode())])
                for index in range(uploads)
            )
        )

    results = asyncio.run(workflow())
    urls = [url for batch in results for url in batch]

    assert len(set(urls)) == uploads
    stored = sorted(path.read_bytes() for path in tmp_path.iterdir())
    assert stored == sorted(f"image-{index}".encode() for index in range(uploads))
