"""Application service: Export Orders use case.

Produces a spreadsheet-friendly CSV: one row per line item, with the
order columns filled in only on an order's first row. The BOM makes Excel
pick up the UTF-8 encoding of the Chinese header.
"""

from __future__ import annotations

import csv
import io

from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository

CSV_HEADER = ("订单ID", "姓名", "状态", "下单时间", "商品名称")
CSV_LINE_TERMINATOR = "\r\n"
CSV_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
UTF8_BOM = "\ufeff"


class ExportOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> bytes:
        buffer = io.StringIO()
        buffer.write(",".join(CSV_HEADER) + CSV_LINE_TERMINATOR)

        writer = csv.writer(
            buffer,
            quoting=csv.QUOTE_ALL,
            lineterminator=CSV_LINE_TERMINATOR,
        )
        for order in self._order_repo.list_all():
            writer.writerows(self._rows_for(order))

        return (UTF8_BOM + buffer.getvalue()).encode("utf-8")

    @staticmethod
    def _rows_for(order: Order) -> list[list[str]]:
        head = [
            str(order.id),
            order.customer.name,
            order.status.value,
            order.created_at.astimezone().strftime(CSV_TIME_FORMAT),
        ]
        if not order.items:
            return [head + [""]]

        blank = [""] * len(head)
        rows = [head + [order.items[0].name]]
        rows.extend(blank + [item.name] for item in order.items[1:])
        return rows
