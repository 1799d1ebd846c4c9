"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.change_status import (
    ActivateProductHandler,
    DeactivateProductHandler,
)
from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import (
    CreateProductDTO,
    MoneyDTO,
    ProductDTO,
    UpdateProductDTO,
)
from catalog.application.list_products import (
    ListActiveProductsHandler,
    ListLowStockProductsHandler,
    ListProductsHandler,
    SearchProductsHandler,
)
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.application.update_stock import (
    DecreaseStockHandler,
    IncreaseStockHandler,
    UpdateStockHandler,
)
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository


def _stock_flag(dto: ProductDTO) -> str:
    if not dto.is_active:
        return "inactive"
    if dto.is_out_of_stock:
        return "out"
    if dto.is_low_stock:
        return "low"
    return "ok"


def _display_table(dtos: list[ProductDTO]) -> None:
    if not dtos:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>14} {'Stock':>7} {'Status':>9}")
    click.echo("-" * 64)
    for p in dtos:
        price = f"{p.price.amount:.2f} {p.price.currency}"
        click.echo(
            f"{p.id:<6} {p.name:<24} {price:>14} {p.stock_quantity:>7} {_stock_flag(p):>9}"
        )


def _display_product(dto: ProductDTO) -> None:
    """Shared formatting for displaying a single product."""
    click.echo(f"Product #{dto.id}  ({'active' if dto.is_active else 'inactive'})")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description}")
    click.echo(f"Price:       {dto.price.amount:.2f} {dto.price.currency}")
    click.echo(f"Stock:       {dto.stock_quantity}  ({_stock_flag(dto)})")
    click.echo(f"Created:     {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    if dto.updated_at is not None:
        click.echo(f"Updated:     {dto.updated_at.strftime('%Y-%m-%d %H:%M UTC')}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 19.99).")
@click.option("--currency", default="USD", show_default=True, help="Currency code.")
@click.option("--stock", default=0, type=int, show_default=True, help="Units on hand.")
def product_add(name: str, description: str, price: str, currency: str, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            CreateProductDTO(
                name=name,
                description=description,
                price=MoneyDTO(amount=price, currency=currency),
                stock_quantity=stock,
            )
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{dto.id} '{dto.name}' added at "
        f"{dto.price.amount:.2f} {dto.price.currency}"
    )


@click.command("list")
@click.option("--active", is_flag=True, default=False, help="Only active products.")
@click.option(
    "--low-stock", "low_stock", type=int, default=None,
    help="Only active products with at most this many units.",
)
def product_list(active: bool, low_stock: int | None) -> None:
    """List products in the catalog."""
    repo = product_repository()
    if low_stock is not None:
        dtos = ListLowStockProductsHandler(repo).handle(low_stock)
    elif active:
        dtos = ListActiveProductsHandler(repo).handle()
    else:
        dtos = ListProductsHandler(repo).handle()

    _display_table(dtos)


@click.command("search")
@click.option("--name", required=True, help="Name fragment (case-insensitive).")
def product_search(name: str) -> None:
    """Search active products by name."""
    if not name.strip():
        raise click.BadParameter("Search term cannot be empty", param_hint="--name")

    _display_table(SearchProductsHandler(product_repository()).handle(name))


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show details of a product."""
    dto = ShowProductHandler(product_repository()).handle(product_id)
    if dto is None:
        raise click.ClickException(f"Product with ID {product_id} not found")

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--description", required=True, help="New description.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--currency", default="USD", show_default=True, help="Currency code.")
def product_update(
    product_id: int, name: str, description: str, price: str, currency: str
) -> None:
    """Replace a product's name, description and price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            product_id,
            UpdateProductDTO(
                name=name,
                description=description,
                price=MoneyDTO(amount=price, currency=currency),
            ),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} updated.")
    _display_product(dto)


@click.command("stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
def product_stock(product_id: int, quantity: int) -> None:
    """Set the stock level (e.g. after a stock count)."""
    try:
        dto = UpdateStockHandler(product_repository()).handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} stock set to {dto.stock_quantity}")


@click.command("restock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units received.")
def product_restock(product_id: int, quantity: int) -> None:
    """Add received units to stock."""
    try:
        dto = IncreaseStockHandler(product_repository()).handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} restocked, {dto.stock_quantity} on hand")


@click.command("withdraw")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units taken out.")
def product_withdraw(product_id: int, quantity: int) -> None:
    """Take units out of stock."""
    try:
        dto = DecreaseStockHandler(product_repository()).handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} withdrawn, {dto.stock_quantity} on hand")


@click.command("activate")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_activate(product_id: int) -> None:
    """Make a product visible in active listings and search."""
    try:
        ActivateProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} activated.")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_deactivate(product_id: int) -> None:
    """Hide a product from active listings and search."""
    try:
        DeactivateProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deactivated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        DeleteProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
