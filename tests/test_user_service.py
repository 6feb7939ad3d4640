import hashlib

import pytest
from sqlalchemy import insert, select
from unittest.mock import patch

from storefront.core.exceptions import DatabaseError
from storefront.core.states import AuthSession
from storefront.models import User
from storefront.repositories.user_repository import UserRepository
from storefront.services.user_service import UserService
from storefront.utils.credentials import CredentialChecker


class Sha256Credentials(CredentialChecker):
    def encode(self, password):
        return hashlib.sha256(password.encode()).hexdigest()

    def verify(self, password, stored):
        return stored == self.encode(password)


@pytest.mark.asyncio
async def test_create_account_then_log_in(gateway):
    svc = UserService(gateway)
    state = AuthSession()

    user_id = await svc.create_account("alice", "pw", 10, 10)
    assert user_id == 1

    assert await svc.authenticate("alice", "pw", state)
    assert state.user_id == 1
    assert state.role == "customer"
    assert state.is_authenticated


@pytest.mark.asyncio
async def test_create_account_allows_duplicate_names(gateway):
    svc = UserService(gateway)
    await svc.create_account("alice", "pw", 10, 10)
    await svc.create_account("alice", "other", 1, 1)

    assert await gateway.execute_query_count(select(User.user_id)) == 2


@pytest.mark.asyncio
async def test_wrong_password_leaves_session_untouched(seeded):
    svc = UserService(seeded)
    state = AuthSession()

    assert not await svc.authenticate("alice", "wrong", state)
    assert state == AuthSession()

    state.log_in(4, "bob", "customer")
    assert not await svc.authenticate("alice", "wrong", state)
    assert state.user_id == 4


@pytest.mark.asyncio
async def test_unknown_user_fails(seeded):
    state = AuthSession()
    assert not await UserService(seeded).authenticate("nobody", "pw", state)
    assert not state.is_authenticated


@pytest.mark.asyncio
async def test_duplicate_credentials_pick_lowest_id(seeded):
    await seeded.execute_write(
        insert(User).values(
            [
                dict(user_id=9, name="twin", password="same", latitude=0.0, longitude=0.0, role="manager"),
                dict(user_id=7, name="twin", password="same", latitude=0.0, longitude=0.0, role="customer"),
            ]
        )
    )
    state = AuthSession()

    assert await UserService(seeded).authenticate("twin", "same", state)
    assert state.user_id == 7
    assert state.role == "customer"


@pytest.mark.asyncio
async def test_role_is_normalised(gateway):
    await gateway.execute_write(
        insert(User).values(
            name="Boss", password="x", latitude=0.0, longitude=0.0, role="Manager "
        )
    )
    state = AuthSession()

    assert await UserService(gateway).authenticate("Boss", "x", state)
    assert state.role == "manager"


@pytest.mark.asyncio
async def test_log_in_with_blank_padded_columns(gateway):
    await gateway.execute_write(
        insert(User).values(
            name="alice",
            password="pw".ljust(11),
            latitude=0.0,
            longitude=0.0,
            role="customer".ljust(8),
        )
    )
    state = AuthSession()

    assert await UserService(gateway).authenticate("alice", "pw", state)
    assert state.role == "customer"
    assert not await UserService(gateway).authenticate("alice", "pw ", AuthSession())


@pytest.mark.asyncio
async def test_credential_checker_can_be_replaced(gateway):
    svc = UserService(gateway, credentials=Sha256Credentials())
    await svc.create_account("carol", "secret", 0, 0)

    rows = await gateway.execute_query_rows(select(User.password))
    assert rows[0][0] != "secret"

    state = AuthSession()
    assert await svc.authenticate("carol", "secret", state)
    assert not await svc.authenticate("carol", rows[0][0], AuthSession())


@pytest.mark.asyncio
async def test_update_user_overwrites_every_field(seeded):
    svc = UserService(seeded)
    assert await svc.exists(4)
    assert not await svc.exists(99)

    await svc.update_user(4, "robert", "new", 1.5, 2.5, "manager")

    rows = await seeded.execute_query_rows(
        select(User.name, User.password, User.latitude, User.longitude, User.role).where(
            User.user_id == 4
        )
    )
    assert rows == [["robert", "new", "1.5", "2.5", "manager"]]


@pytest.mark.asyncio
async def test_authenticate_propagates_database_errors(seeded):
    state = AuthSession()
    with patch.object(
        UserRepository, "get_credentials_by_name", side_effect=DatabaseError("DB Error")
    ):
        with pytest.raises(DatabaseError):
            await UserService(seeded).authenticate("alice", "pw", state)
    assert not state.is_authenticated
