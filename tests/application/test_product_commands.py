"""Integration tests for the update, stock, status and delete use cases."""

from decimal import Decimal

import pytest

from catalog.application.change_status import (
    ActivateProductHandler,
    DeactivateProductHandler,
)
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import MoneyDTO, UpdateProductDTO
from catalog.application.update_product import UpdateProductHandler
from catalog.application.update_stock import (
    DecreaseStockHandler,
    IncreaseStockHandler,
    UpdateStockHandler,
)
from catalog.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import SpyProductRepository


def _setup(stock: int = 5, repo=None):
    repo = repo or InMemoryProductRepository()
    product = repo.add(Product("Lamp", "Desk lamp", Money.of("19.99"), stock))
    return repo, product.id


class TestUpdateProduct:

    def test_updates_details(self):
        repo, product_id = _setup()
        dto = UpdateProductHandler(repo).handle(
            product_id,
            UpdateProductDTO("Floor lamp", "Tall lamp", MoneyDTO("49.50", "EUR")),
        )
        assert dto.name == "Floor lamp"
        assert dto.price == MoneyDTO(Decimal("49.50"), "EUR")
        assert dto.updated_at is not None
        assert repo.get_by_id(product_id).name == "Floor lamp"

    def test_unknown_product_rejected(self):
        repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product with ID 99 not found"):
            UpdateProductHandler(repo).handle(
                99, UpdateProductDTO("Floor lamp", "Tall lamp", MoneyDTO("49"))
            )

    def test_invalid_details_leave_stored_product_untouched(self):
        repo, product_id = _setup()
        with pytest.raises(ValidationError):
            UpdateProductHandler(repo).handle(
                product_id, UpdateProductDTO("Floor lamp", "Tall lamp", MoneyDTO("0"))
            )
        stored = repo.get_by_id(product_id)
        assert stored.name == "Lamp"
        assert stored.updated_at is None


class TestStockHandlers:

    def test_set_stock(self):
        repo, product_id = _setup(stock=5)
        dto = UpdateStockHandler(repo).handle(product_id, 0)
        assert dto.stock_quantity == 0
        assert dto.is_in_stock is False
        assert dto.is_out_of_stock is True
        assert dto.is_low_stock is False
        assert repo.get_by_id(product_id).stock_quantity == 0

    def test_set_negative_stock_rejected(self):
        repo, product_id = _setup(stock=5)
        with pytest.raises(ValidationError):
            UpdateStockHandler(repo).handle(product_id, -4)
        assert repo.get_by_id(product_id).stock_quantity == 5

    def test_increase_and_decrease(self):
        repo, product_id = _setup(stock=5)
        assert IncreaseStockHandler(repo).handle(product_id, 10).stock_quantity == 15
        assert DecreaseStockHandler(repo).handle(product_id, 15).stock_quantity == 0
        assert repo.get_by_id(product_id).stock_quantity == 0

    def test_decrease_beyond_stock_rejected_and_not_persisted(self):
        repo, product_id = _setup(repo=SpyProductRepository(), stock=2)
        with pytest.raises(InsufficientStockError):
            DecreaseStockHandler(repo).handle(product_id, 3)
        assert repo.get_by_id(product_id).stock_quantity == 2
        assert "update" not in repo.calls

    @pytest.mark.parametrize(
        "handler_cls", [UpdateStockHandler, IncreaseStockHandler, DecreaseStockHandler]
    )
    def test_unknown_product_rejected(self, handler_cls):
        repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler_cls(repo).handle(42, 1)


class TestChangeStatus:

    def test_deactivate_and_activate(self):
        repo, product_id = _setup(stock=3)
        dto = DeactivateProductHandler(repo).handle(product_id)
        assert dto.is_active is False
        assert dto.is_in_stock is False
        assert dto.is_low_stock is False
        assert repo.get_by_id(product_id).is_active is False

        dto = ActivateProductHandler(repo).handle(product_id)
        assert dto.is_active is True
        assert dto.is_in_stock is True

    def test_activating_active_product_is_not_an_error(self):
        repo, product_id = _setup()
        ActivateProductHandler(repo).handle(product_id)
        assert ActivateProductHandler(repo).handle(product_id).is_active is True

    @pytest.mark.parametrize(
        "handler_cls", [ActivateProductHandler, DeactivateProductHandler]
    )
    def test_unknown_product_rejected(self, handler_cls):
        repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler_cls(repo).handle(42)


class TestDeleteProduct:

    def test_deletes(self):
        repo, product_id = _setup()
        DeleteProductHandler(repo).handle(product_id)
        assert repo.get_by_id(product_id) is None
        assert not repo.exists(product_id)

    def test_unknown_product_rejected_before_touching_storage(self):
        repo, _ = _setup(repo=SpyProductRepository())
        with pytest.raises(EntityNotFoundError, match="Product with ID 7 not found"):
            DeleteProductHandler(repo).handle(7)
        assert "delete" not in repo.calls

    def test_deleting_twice_fails_the_second_time(self):
        repo, product_id = _setup()
        DeleteProductHandler(repo).handle(product_id)
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(repo).handle(product_id)
