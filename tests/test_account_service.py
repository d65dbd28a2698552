import asyncio
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from infrastructure.database.database import Database
from infrastructure.database.repositories import CartRepository, UserRepository
from services.auth import AccountService, TokenService
from services.auth.passwords import is_hashed
from services.errors import ConflictError, NotFoundError, ValidationError

SECRET = "account-test-signing-secret-0123456789"


def _run(settings, scenario):
    async def workflow() -> None:
        database = Database(settings.database_url)
        await database.create_tables()
        try:
            async with database.SessionLocal() as session:
                service = AccountService(session, TokenService(SECRET), cart_slots=300)
                await scenario(session, service)
                await session.commit()
        finally:
            await database.dispose()

    asyncio.run(workflow())


def test_signup_hashes_password_and_seeds_cart(settings):
    async def scenario(session, service):
        token = await service.signup(name="A", email="a@x.com", password="p")
        user_id = TokenService(SECRET).verify(token)

        user = await UserRepository(session).get_by_id(user_id)
        assert user.name == "A"
        assert is_hashed(user.password)

        cart = await CartRepository(session).get_cart(user_id)
        assert len(cart) == 300
        assert set(cart.values()) == {0}

    _run(settings, scenario)


def test_signup_validation_and_conflict(settings):
    async def scenario(session, service):
        with pytest.raises(ValidationError) as excinfo:
            await service.signup(name="A", email="", password="p")
        assert excinfo.value.to_payload() == {"success": False, "errors": "All fields are required"}

        await service.signup(name="A", email="a@x.com", password="p")
        with pytest.raises(ConflictError):
            await service.signup(name="Other", email="a@x.com", password="q")

    _run(settings, scenario)


def test_login_outcomes(settings):
    async def scenario(session, service):
        await service.signup(name="A", email="a@x.com", password="p")

        ok = await service.login(email="a@x.com", password="p")
        assert ok.success is True
        assert TokenService(SECRET).verify(ok.token)

        wrong_password = await service.login(email="a@x.com", password="x")
        assert (wrong_password.success, wrong_password.errors) == (False, "Wrong Password")

        wrong_email = await service.login(email="nobody@x.com", password="p")
        assert (wrong_email.success, wrong_email.errors) == (False, "Wrong Email Id")

    _run(settings, scenario)


def test_login_with_legacy_plaintext_credential(settings):
    async def scenario(session, service):
        await UserRepository(session).create_user(name="Old", email="old@x.com", password="plain")

        assert (await service.login(email="old@x.com", password="plain")).success is True
        assert (await service.login(email="old@x.com", password="Plain")).success is False

    _run(settings, scenario)


def test_update_profile_overwrites_both_fields(settings):
    async def scenario(session, service):
        token = await service.signup(name="A", email="a@x.com", password="p")
        user_id = TokenService(SECRET).verify(token)

        user = await service.update_profile(user_id, name="Alice", email="alice@x.com")
        assert (user.name, user.email) == ("Alice", "alice@x.com")

        with pytest.raises(NotFoundError):
            await service.update_profile(user_id + 1, name="B", email="b@x.com")

    _run(settings, scenario)
