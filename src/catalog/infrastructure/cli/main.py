import click

from catalog.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_deactivate,
    product_delete,
    product_list,
    product_restock,
    product_search,
    product_show,
    product_stock,
    product_update,
    product_withdraw,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Catalog: product catalog and stock management"""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (defaults to CATALOG_HOST).")
@click.option("--port", default=None, type=int, help="Port (defaults to CATALOG_PORT).")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "catalog.infrastructure.api.app:create_app",
        factory=True,
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


# Register subcommands
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_restock)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_stock)
product.add_command(product_update)
product.add_command(product_withdraw)
