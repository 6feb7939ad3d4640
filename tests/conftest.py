import click
import pytest
import pytest_asyncio
import sqlalchemy as sa
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import storefront.models  # noqa: F401
from storefront.core.database import Base
from storefront.core.gateway import DataGateway
from storefront.core.states import AuthSession
from storefront.models import Product, Store, User, Warehouse
from storefront.utils.console import Console

USERS = [
    dict(user_id=1, name="alice", password="pw", latitude=10.0, longitude=10.0, role="customer"),
    dict(user_id=2, name="mike", password="mgr", latitude=0.0, longitude=0.0, role="manager"),
    dict(user_id=3, name="root", password="toor", latitude=0.0, longitude=0.0, role="admin"),
    dict(user_id=4, name="bob", password="pw2", latitude=50.0, longitude=50.0, role="customer"),
    dict(user_id=5, name="mary", password="mgr2", latitude=80.0, longitude=80.0, role="manager"),
]

STORES = [
    dict(store_id=1, name="Downtown", latitude=10.0, longitude=10.0, manager_id=2),
    dict(store_id=2, name="Uptown", latitude=28.0, longitude=10.0, manager_id=2),
    dict(store_id=3, name="Faraway", latitude=80.0, longitude=80.0, manager_id=5),
]

PRODUCTS = [
    dict(store_id=1, product_name="Apple", number_of_units=10, price_per_unit=1.5),
    dict(store_id=1, product_name="Banana", number_of_units=5, price_per_unit=0.25),
    dict(store_id=2, product_name="Apple", number_of_units=7, price_per_unit=1.75),
    dict(store_id=3, product_name="Milk", number_of_units=3, price_per_unit=2.0),
]

WAREHOUSES = [
    dict(warehouse_id=1, area=1000.0, latitude=5.0, longitude=5.0),
    dict(warehouse_id=2, area=500.0, latitude=60.0, longitude=60.0),
]


class ScriptedConsole(Console):
    """Console that replays prepared answers and records everything printed."""

    def __init__(self, answers=()):
        self.answers = [str(answer) for answer in answers]
        self.prompts = []
        self.lines = []
        self.errors = []

    def echo(self, message: str = "") -> None:
        self.lines.extend(str(message).split("\n"))

    def error(self, message: str) -> None:
        self.errors.append(message)

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if not self.answers:
            raise click.Abort()
        return self.answers.pop(0)

    def confirm(self, text: str) -> bool:
        return self.prompt(text).strip().lower() in ("y", "yes")

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, future=True, poolclass=StaticPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def connection(engine):
    async with engine.connect() as connection:
        yield connection


@pytest_asyncio.fixture
async def gateway(connection):
    return DataGateway(connection)


@pytest_asyncio.fixture
async def seeded(gateway):
    await gateway.execute_write(insert(User).values(USERS))
    await gateway.execute_write(insert(Store).values(STORES))
    await gateway.execute_write(insert(Product).values(PRODUCTS))
    await gateway.execute_write(insert(Warehouse).values(WAREHOUSES))
    return gateway


@pytest.fixture
def create_console():
    def _create_console(*answers):
        return ScriptedConsole(answers)

    return _create_console


@pytest.fixture
def state():
    return AuthSession()


@pytest.fixture
def login_as(state):
    def _login_as(user_id: int, role: str, name: str = "test"):
        state.log_in(user_id, name, role)
        return state

    return _login_as


@pytest.fixture
def database_file(tmp_path):
    """Seeded SQLite file for running the whole program through click."""
    path = tmp_path / "storefront.db"
    engine = sa.create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(sa.insert(User).values(USERS))
        conn.execute(sa.insert(Store).values(STORES))
        conn.execute(sa.insert(Product).values(PRODUCTS))
        conn.execute(sa.insert(Warehouse).values(WAREHOUSES))
    engine.dispose()
    return path
