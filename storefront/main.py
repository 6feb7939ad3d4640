import asyncio
import logging
import signal
from typing import Optional

import click
from sqlalchemy.exc import SQLAlchemyError

from storefront.core.config import (
    DATABASE_URL,
    DB_HOST,
    DB_PASSWORD,
    LOG_FILE,
    LOG_LEVEL,
)
from storefront.core.database import build_database_url, create_engine, create_schema
from storefront.core.gateway import DataGateway
from storefront.handlers.menu_handler import run_main_menu
from storefront.utils.console import Console
from storefront.utils.menu import GREETING_TEXT

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    options = dict(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if LOG_FILE:
        options["filename"] = LOG_FILE
    logging.basicConfig(**options)


def _terminate(signum, frame):
    # Unwinds through the finally blocks that close the connection
    raise SystemExit(128 + signum)


async def run(database_url, init_schema: bool, console: Console) -> int:
    """
    Connects, runs the menus and always closes the connection afterwards.

    Returns:
        int: Process exit status
    """
    engine = None
    console.echo("Connecting to database...")
    try:
        engine = create_engine(database_url)
        if init_schema:
            await create_schema(engine)
        connection = await engine.connect()
    except (SQLAlchemyError, OSError, ImportError) as e:
        # ImportError: the URL names a driver that is not installed
        if engine is not None:
            await engine.dispose()
        logger.error("Connection failed: %s", e)
        console.error(f"Error - Unable to Connect to Database: {e}")
        console.echo("Make sure you started postgres on this machine")
        return 1
    console.echo("Done")

    try:
        await run_main_menu(console, DataGateway(connection))
    finally:
        console.echo("Disconnecting from database...")
        await connection.close()
        await engine.dispose()
        console.echo("Done\n\nBye !")
    return 0


@click.command()
@click.argument("dbname")
@click.argument("port", type=int)
@click.argument("user")
@click.option("--password", envvar="STOREFRONT_DB_PASSWORD", default=DB_PASSWORD)
@click.option("--host", envvar="STOREFRONT_DB_HOST", default=DB_HOST)
@click.option(
    "--database-url",
    envvar="DATABASE_URL",
    default=DATABASE_URL,
    help="Full SQLAlchemy URL; overrides DBNAME, PORT and USER.",
)
@click.option(
    "--init-schema", is_flag=True, help="Create missing tables before starting."
)
def main(
    dbname: str,
    port: int,
    user: str,
    password: str,
    host: str,
    database_url: Optional[str],
    init_schema: bool,
):
    """Retail ordering console for the store database DBNAME on PORT."""
    configure_logging()
    signal.signal(signal.SIGTERM, _terminate)

    url = database_url or build_database_url(dbname, port, user, password, host)
    console = Console()
    console.echo(GREETING_TEXT)
    status = asyncio.run(run(url, init_schema, console))
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
