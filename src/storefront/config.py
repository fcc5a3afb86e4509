"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

ORDER_STORES = ("memory", "json")


def _default_data_dir() -> Path:
    """``./data`` under the directory the server was started from."""
    return Path.cwd() / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = field(default_factory=_default_data_dir)
    admin_password: str = "123"
    order_store: str = "memory"
    static_dir: Path | None = None
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        order_store = env.get("STOREFRONT_ORDER_STORE", cls.order_store).lower()
        if order_store not in ORDER_STORES:
            raise ValueError(
                f"STOREFRONT_ORDER_STORE must be one of {ORDER_STORES}, got {order_store!r}"
            )

        static_dir = env.get("STOREFRONT_STATIC_DIR")
        return cls(
            data_dir=Path(env["STOREFRONT_DATA_DIR"])
            if env.get("STOREFRONT_DATA_DIR")
            else _default_data_dir(),
            admin_password=env.get("STOREFRONT_ADMIN_PASSWORD", cls.admin_password),
            order_store=order_store,
            static_dir=Path(static_dir) if static_dir else None,
            log_level=env.get("STOREFRONT_LOG_LEVEL", cls.log_level).upper(),
            host=env.get("STOREFRONT_HOST", cls.host),
            port=int(env.get("STOREFRONT_PORT", cls.port)),
        )