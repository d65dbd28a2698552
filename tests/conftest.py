import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings  # noqa: E402

TEST_JWT_SECRET = "test-signing-secret-0123456789abcdef"


def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=sqlite_url(tmp_path),
        jwt_secret=TEST_JWT_SECRET,
        stripe_secret_key="sk_test_dummy",
        public_base_url="http://testserver",
        upload_dir=str(tmp_path / "images"),
        cart_legacy_slots=300,
    )
