"""Product sales and inventory report for a single product."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

TAX_RATE = 0.15
LOW_INVENTORY_THRESHOLD = 10


class Category(Enum):
    """Product categories by their numeric code."""

    ELECTRONICS = 1
    GROCERIES = 2
    CLOTHING = 3
    STATIONERY = 4
    MISCELLANEOUS = 5

    @property
    def label(self) -> str:
        return self.name.title()


@dataclass
class SaleRecord:
    """Sales figures entered for one product."""

    workers: int
    product_name: str
    category: int
    initial_inventory: int
    price_per_unit: float
    items_sold: int

    def total_sales(self) -> float:
        """Sales amount before tax."""
        return self.price_per_unit * self.items_sold

    def total_with_tax(self) -> float:
        """Sales amount including tax."""
        total = self.total_sales()
        return total + total * TAX_RATE


def inventory_status(record: SaleRecord) -> str:
    """Describe whether the remaining stock is low."""
    remaining = record.initial_inventory - record.items_sold
    return "Low inventory!" if remaining < LOW_INVENTORY_THRESHOLD else "Sufficient inventory!"


_FIELDS: list[tuple[str, str, Callable[[str], object]]] = [
    ("workers", "enter the number of workers: ", int),
    ("product_name", "What is your product name?", str),
    ("category", "What is your product category?", int),
    ("initial_inventory", "What is your initial inventory quantity?", int),
    ("price_per_unit", "What is your product price?", float),
    ("items_sold", "What is the number of items sold?", int),
]


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_fields(tokens: Iterator[str], prompt: Callable[[str], None] | None) -> SaleRecord:
    values = {}
    for name, question, convert in _FIELDS:
        if prompt is not None:
            prompt(question)
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError(f"missing value for {name}") from None
        try:
            values[name] = convert(token)
        except ValueError:
            raise ValueError(f"invalid value for {name}: {token!r}") from None
    return SaleRecord(**values)


def read_record(lines: Iterable[str]) -> SaleRecord:
    """Read whitespace-separated answers from lines into a record."""
    return _read_fields(_tokens(lines), None)


def render_report(record: SaleRecord) -> str:
    """Render the sales report as text."""
    parts = [
        "INVENTORY SALES REPORT\n",
        "\n",
        f"The number of workers is: {record.workers}\n",
        f"Your product name is: {record.product_name}\n",
        f"Your product category: {record.category}\n",
        f"Your initial inventory quantity is: {record.initial_inventory}\n",
        f"{inventory_status(record)}\n",
        f"Your product price per item is: {record.price_per_unit:g}\n",
        f"The number of items sold is: {record.items_sold}\n",
        "\n",
        f"The constant tax rate is: {TAX_RATE:g}\n",
        f"The tax rate is: {TAX_RATE:g}\n",
        "\n",
    ]
    try:
        category = Category(record.category)
    except ValueError:
        parts.append(
            "The category is out of range. "
            "Please enter a category between 1 and 5(including).\n"
        )
    else:
        parts.append(f"You entered a valid category: {record.category}\n")
        parts.append(f"Category {category.value}: {category.label}")
    parts.append("\n")
    parts.append(" Receipt:\n")
    parts.extend(
        f"Item: {item}:{record.price_per_unit:g} Birr\n"
        for item in range(1, record.items_sold + 1)
    )
    parts.append("\n")
    parts.append(f"The total sales amount is (WITHOUT TAX): {record.total_sales():g}\n")
    parts.append(f"The total sales amount is: {record.total_with_tax():g}\n")
    parts.append(
        "\nProcessing complete! Thank you for using the product sales and inventory analyzer."
    )
    return "".join(parts)


def main(argv=None) -> int:
    """Ask for the product figures on standard input and print the report."""
    parser = argparse.ArgumentParser(description="Product sales and inventory report")
    parser.parse_args(argv)
    print("This program analyzes product sales and inventory for a store")
    try:
        record = _read_fields(_tokens(sys.stdin), print)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(render_report(record))
    return 0