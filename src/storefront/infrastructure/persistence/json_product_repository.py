"""JSON-file-backed implementation of ProductRepository.

The catalog is a single JSON array. Every mutation reads the whole file,
changes it in memory and writes the whole file back, all under one lock
so id assignment and concurrent rewrites cannot interleave.
"""

from __future__ import annotations

import json
import threading
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import EntityNotFoundError, StorageError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            records = self._load_raw()
        for raw in records:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        with self._lock:
            records = self._load_raw()
        return [self._to_domain(raw) for raw in records]

    def save(self, product: Product) -> None:
        with self._lock:
            records = self._load_raw()

            is_new = product.id is None
            if is_new:
                product.id = max((r["id"] for r in records), default=0) + 1

            # Replace if present; only a new product may be appended
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    break
            else:
                if not is_new:
                    raise EntityNotFoundError(f"Product with ID {product.id} not found")
                records.append(self._to_raw(product))

            self._persist_raw(records)

    def delete(self, product_id: int) -> Product | None:
        with self._lock:
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == product_id:
                    removed = records.pop(i)
                    self._persist_raw(records)
                    return self._to_domain(removed)
            return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": product.price.as_number(),
            "stock": product.stock,
            "image": product.image,
            "description": product.description,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        try:
            return Product(
                id=raw["id"],
                name=raw["name"],
                price=Money(Decimal(str(raw["price"]))),
                stock=raw.get("stock", 0),
                image=raw.get("image", ""),
                description=raw.get("description", ""),
            )
        except (KeyError, TypeError, ArithmeticError, ValidationError) as exc:
            raise StorageError(f"Malformed product record: {raw!r}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read product catalog {self._file_path}") from exc
        if not isinstance(data, list) or not all(
            isinstance(r, dict) and "id" in r for r in data
        ):
            raise StorageError(f"Product catalog {self._file_path} is malformed")
        return data

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise StorageError(f"Cannot write product catalog {self._file_path}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
