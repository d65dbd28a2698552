import asyncio
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from infrastructure.context import ContextScope
from infrastructure.database.database import Database
from infrastructure.database.repositories import UserRepository
from services.cart import CartService
from services.errors import NotFoundError, ValidationError


def _run(settings, scenario, *, cart_slots=0):
    """Run ``scenario(session, user_ids)`` against a fresh database with two users."""

    async def workflow() -> None:
        database = Database(settings.database_url)
        await database.create_tables()
        try:
            async with database.SessionLocal() as session:
                users = UserRepository(session)
                first = await users.create_user(name="A", email="a@x.com", password="p", cart_slots=cart_slots)
                second = await users.create_user(name="B", email="b@x.com", password="p", cart_slots=cart_slots)
                await session.commit()
                await scenario(session, (first.id, second.id))
                await session.commit()
        finally:
            await database.dispose()

    asyncio.run(workflow())


def test_repeated_adds_count_up(settings):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        for _ in range(5):
            await service.add_to_cart(3, "L")
        cart = await service.get_cart()
        assert cart == {"3-L": 5}

    _run(settings, scenario)


def test_add_add_remove_leaves_one(settings):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        await service.add_to_cart(5, "M")
        await service.add_to_cart(5, "M")
        await service.remove_from_cart(5, "M")
        assert (await service.get_cart())["5-M"] == 1

    _run(settings, scenario)


def test_string_and_numeric_item_ids_share_a_key(settings):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        await service.add_to_cart("5", "M")
        await service.add_to_cart(5, "M")
        await service.add_to_cart(5.0, "M")
        assert await service.get_cart() == {"5-M": 3}

    _run(settings, scenario)


def test_remove_never_goes_negative(settings):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        await service.remove_from_cart(9, "S")
        await service.add_to_cart(9, "S")
        await service.remove_from_cart(9, "S")
        await service.remove_from_cart(9, "S")
        await service.remove_from_cart(9, "S")
        cart = await service.get_cart()
        assert cart == {"9-S": 0}
        assert all(quantity >= 0 for quantity in cart.values())

    _run(settings, scenario)


def test_carts_are_isolated_per_user(settings):
    async def scenario(session, user_ids):
        first = CartService(session, ContextScope(user_id=user_ids[0]))
        second = CartService(session, ContextScope(user_id=user_ids[1]))
        await first.add_to_cart(1, "M")
        await first.add_to_cart(1, "M")
        await second.add_to_cart(1, "M")
        await second.remove_from_cart(1, "M")

        assert await first.get_cart() == {"1-M": 2}
        assert await second.get_cart() == {"1-M": 0}

    _run(settings, scenario)


def test_cart_includes_legacy_zero_slots(settings):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        await service.add_to_cart(2, "XL")
        cart = await service.get_cart()
        assert len(cart) == 301
        assert cart["0"] == 0
        assert cart["299"] == 0
        assert cart["2-XL"] == 1

    _run(settings, scenario, cart_slots=300)


@pytest.mark.parametrize(
    "item_id, size",
    [
        (None, "M"),
        ("", "M"),
        ("abc", "M"),
        (0, "M"),
        (5, None),
        (5, ""),
        (True, "M"),
    ],
)
def test_add_to_cart_rejects_invalid_input(settings, item_id, size):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        with pytest.raises(ValidationError):
            await service.add_to_cart(item_id, size)
        assert await service.get_cart() == {}

    _run(settings, scenario)


@pytest.mark.parametrize("item_id, size", [(None, "M"), ("", "M"), (5, None)])
def test_remove_from_cart_rejects_missing_fields(settings, item_id, size):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        with pytest.raises(ValidationError):
            await service.remove_from_cart(item_id, size)

    _run(settings, scenario)


def test_unknown_user_is_not_found(settings):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=max(user_ids) + 100))
        with pytest.raises(NotFoundError):
            await service.add_to_cart(1, "M")
        with pytest.raises(NotFoundError):
            await service.get_favorites()

    _run(settings, scenario)


def test_add_favorite_is_a_set_insert(settings):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        assert await service.add_favorite(4) == (True, "Added to favorites.")
        assert await service.add_favorite(2) == (True, "Added to favorites.")
        assert await service.add_favorite(4) == (False, "Already in favorites.")
        assert await service.add_favorite("2") == (False, "Already in favorites.")
        assert await service.get_favorites() == [4, 2]

    _run(settings, scenario)


def test_remove_favorite_is_idempotent(settings):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        await service.add_favorite(1)
        await service.add_favorite(2)
        await service.add_favorite(3)

        assert await service.remove_favorite(2) == (True, "Removed from favorites.")
        assert await service.remove_favorite(2) == (True, "Removed from favorites.")
        assert await service.remove_favorite(99) == (True, "Removed from favorites.")
        assert await service.get_favorites() == [1, 3]

    _run(settings, scenario)


def test_favorites_are_isolated_per_user(settings):
    async def scenario(session, user_ids):
        first = CartService(session, ContextScope(user_id=user_ids[0]))
        second = CartService(session, ContextScope(user_id=user_ids[1]))
        await first.add_favorite(8)
        assert await second.add_favorite(8) == (True, "Added to favorites.")
        await second.remove_favorite(8)

        assert await first.get_favorites() == [8]
        assert await second.get_favorites() == []

    _run(settings, scenario)


@pytest.mark.parametrize("item_id", [None, "abc", "1.5", True])
def test_favorites_require_integer_item_id(settings, item_id):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        with pytest.raises(ValidationError):
            await service.add_favorite(item_id)

    _run(settings, scenario)


def test_concurrent_adds_from_separate_sessions_are_all_counted(settings):
    adds = 10

    async def workflow():
        database = Database(settings.database_url)
        await database.create_tables()
        try:
            async with database.SessionLocal() as session:
                user = await UserRepository(session).create_user(name="A", email="a@x.com", password="p")
                await session.commit()
                user_id = user.id

            async def add_once():
                async with database.SessionLocal() as session:
                    await CartService(session, ContextScope(user_id=user_id)).add_to_cart(7, "M")
                    await session.commit()

            await asyncio.gather(*(add_once() for _ in range(adds)))

            async with database.SessionLocal() as session:
                return await CartService(session, ContextScope(user_id=user_id)).get_cart()
        finally:
            await database.dispose()

    cart = asyncio.run(workflow())
    assert cart == {"7-M": adds}


@pytest.mark.parametrize("item_id", [None, "abc", "1.5"])
def test_remove_favorite_with_unusable_id_succeeds_without_changes(settings, item_id):
    async def scenario(session, user_ids):
        service = CartService(session, ContextScope(user_id=user_ids[0]))
        await service.add_favorite(1)

        assert await service.remove_favorite(item_id) == (True, "Removed from favorites.")
        assert await service.get_favorites() == [1]

    _run(settings, scenario)
