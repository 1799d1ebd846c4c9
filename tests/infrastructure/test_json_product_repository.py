"""Tests for the JSON-file-backed product repository."""

import json
import threading
from decimal import Decimal

import pytest

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@pytest.fixture
def path(tmp_path):
    return tmp_path / "data" / "products.json"


def _product(name: str = "Lamp", stock: int = 5) -> Product:
    return Product(name, "Desk lamp", Money.of("19.99", "EUR"), stock)


class TestJsonProductRepository:

    def test_creates_empty_file(self, path):
        JsonProductRepository(path)
        assert json.loads(path.read_text()) == {"next_id": 1, "products": []}

    def test_round_trip_preserves_state(self, path):
        repo = JsonProductRepository(path)
        product = repo.add(_product(stock=0))
        product.deactivate()
        repo.update(product)

        loaded = JsonProductRepository(path).get_by_id(product.id)
        assert loaded.name == "Lamp"
        assert loaded.price == Money(Decimal("19.99"), "EUR")
        assert loaded.stock_quantity == 0
        assert loaded.is_active is False
        assert loaded.created_at == product.created_at
        assert loaded.updated_at == product.updated_at

    def test_ids_survive_restart_and_are_not_reused(self, path):
        repo = JsonProductRepository(path)
        repo.add(_product())
        second = repo.add(_product())
        repo.delete(second.id)

        assert JsonProductRepository(path).add(_product()).id == 3

    def test_update_unknown_product_rejected(self, path):
        repo = JsonProductRepository(path)
        product = repo.add(_product())
        repo.delete(product.id)
        with pytest.raises(EntityNotFoundError):
            repo.update(product)

    def test_delete_missing_is_a_no_op(self, path):
        repo = JsonProductRepository(path)
        repo.add(_product())
        repo.delete(99)
        assert [p.id for p in repo.list_all()] == [1]

    def test_queries(self, path):
        repo = JsonProductRepository(path)
        repo.add(_product("Red Lamp", stock=0))
        repo.add(_product("Chair", stock=50))
        hidden = _product("Blue lamp", stock=2)
        hidden.deactivate()
        repo.add(hidden)

        assert [p.name for p in repo.list_active()] == ["Red Lamp", "Chair"]
        assert [p.name for p in repo.list_low_stock()] == ["Red Lamp"]
        assert [p.name for p in repo.search_by_name("LAMP")] == ["Red Lamp"]
        assert repo.exists(3)
        assert not repo.exists(4)

    def test_failed_write_leaves_product_unidentified(self, path, monkeypatch):
        repo = JsonProductRepository(path)
        before = path.read_text()

        def _disk_full(data):
            raise OSError("No space left on device")

        monkeypatch.setattr(repo, "_persist_raw", _disk_full)
        product = _product()
        with pytest.raises(OSError):
            repo.add(product)

        assert product.id is None
        assert path.read_text() == before

    def test_writes_leave_no_temp_files(self, path):
        repo = JsonProductRepository(path)
        product = repo.add(_product())
        product.update_stock(9)
        repo.update(product)
        repo.delete(product.id)

        assert [p.name for p in path.parent.iterdir()] == ["products.json"]


class TestJsonProductRepositoryConcurrency:

    def test_readers_never_see_a_partial_file(self, path):
        repo = JsonProductRepository(path)
        errors: list[str] = []
        writing = threading.Event()
        writing.set()

        def writer():
            try:
                for i in range(300):
                    repo.add(_product(f"Lamp {i}"))
            finally:
                writing.clear()

        def reader():
            while writing.is_set():
                try:
                    repo.list_all()
                    repo.exists(1)
                except Exception as exc:
                    errors.append(type(exc).__name__)

        threads = [threading.Thread(target=reader) for _ in range(3)]
        threads.append(threading.Thread(target=writer))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert len(repo.list_all()) == 300
        assert json.loads(path.read_text())["next_id"] == 301

    def test_separate_instances_on_one_file_read_consistently(self, path):
        writer_repo = JsonProductRepository(path)
        reader_repo = JsonProductRepository(path)
        errors: list[str] = []
        done = threading.Event()

        def reader():
            while not done.is_set():
                try:
                    reader_repo.list_all()
                except Exception as exc:
                    errors.append(type(exc).__name__)

        t = threading.Thread(target=reader)
        t.start()
        try:
            for i in range(200):
                writer_repo.add(_product(f"Chair {i}"))
        finally:
            done.set()
            t.join()

        assert not errors
        assert len(reader_repo.list_all()) == 200
