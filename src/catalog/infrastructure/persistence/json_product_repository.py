"""JSON-file-backed implementation of ProductRepository.

The file holds the next ID alongside the products so IDs stay unique
across restarts and are never handed out twice::

    {"next_id": 3, "products": [{"id": 1, ...}, {"id": 2, ...}]}
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
import threading
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import structlog

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            products = self._load_raw()["products"]
        for raw in products:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        with self._lock:
            products = self._load_raw()["products"]
        return [self._to_domain(raw) for raw in products]

    def list_active(self) -> list[Product]:
        return [p for p in self.list_all() if p.is_active]

    def list_low_stock(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> list[Product]:
        return [
            p for p in self.list_all()
            if p.is_active and p.stock_quantity <= threshold
        ]

    def search_by_name(self, term: str) -> list[Product]:
        needle = term.lower()
        return [
            p for p in self.list_all()
            if p.is_active and needle in p.name.lower()
        ]

    def add(self, product: Product) -> Product:
        with self._lock:
            data = self._load_raw()
            product_id = data["next_id"]
            # Identity goes on a copy first; the caller's product only gets it once stored.
            stored = copy.deepcopy(product)
            stored.assign_id(product_id)
            data["next_id"] += 1
            data["products"].append(self._to_raw(stored))
            self._persist_raw(data)
            product.assign_id(product_id)
        logger.debug("product_stored", product_id=product.id, path=str(self._file_path))
        return product

    def update(self, product: Product) -> Product:
        with self._lock:
            data = self._load_raw()
            for i, raw in enumerate(data["products"]):
                if raw["id"] == product.id:
                    data["products"][i] = self._to_raw(product)
                    break
            else:
                raise EntityNotFoundError(f"Product with ID {product.id} not found")
            self._persist_raw(data)
        logger.debug("product_replaced", product_id=product.id, path=str(self._file_path))
        return product

    def delete(self, product_id: int) -> None:
        with self._lock:
            data = self._load_raw()
            remaining = [raw for raw in data["products"] if raw["id"] != product_id]
            if len(remaining) == len(data["products"]):
                return
            data["products"] = remaining
            self._persist_raw(data)
        logger.debug("product_removed", product_id=product_id, path=str(self._file_path))

    def exists(self, product_id: int) -> bool:
        with self._lock:
            products = self._load_raw()["products"]
        return any(raw["id"] == product_id for raw in products)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock_quantity": product.stock_quantity,
            "is_active": product.is_active,
            "created_at": product.created_at.isoformat(),
            "updated_at": (
                product.updated_at.isoformat() if product.updated_at else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        updated_at = raw.get("updated_at")
        return Product.restore(
            id=raw["id"],
            name=raw["name"],
            description=raw["description"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock_quantity=raw["stock_quantity"],
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, data: dict) -> None:
        """Swap in a fully written sibling file so readers never see a partial one."""
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(data, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"next_id": 1, "products": []})
