"""
Console entry point: browse the catalogue from a terminal.

    catalog-browser categories
    catalog-browser products smartphones
    catalog-browser product 7
    catalog-browser --log-file logs/browser.log categories
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Sequence

from catalog_browser.domains.models import Category, Error, Loading, Product, Success
from catalog_browser.infrastructure.data.repositories import CatalogRepository, RemoteCatalogRepository
from catalog_browser.infrastructure.data.sources import CatalogClient
from catalog_browser.orchestration.presenters import (
    CategoriesPresenter,
    CategoryProductsPresenter,
    Presenter,
    ProductDetailPresenter,
)
from catalog_browser.services.use_cases import (
    GetCategoriesUseCase,
    GetProductByIdUseCase,
    GetProductsByCategoryUseCase,
)
from catalog_browser.utils.config import load_config, log_level
from catalog_browser.utils.logger import get_logger, setup_logger

log = get_logger()


def _format_category(c: Category) -> str:
    return f"{c.slug}\t{c.name}\t{c.url}"


def _format_product(p: Product) -> str:
    return f"{p.id}\t{p.title}\t{p.price:.2f}\t{p.brand}\t{p.category}"


def _format_detail(p: Product) -> list[str]:
    lines = [
        f"#{p.id} {p.title}",
        f"  brand: {p.brand}  category: {p.category}",
        f"  price: {p.price:.2f}  discount: {p.discount_percentage:.2f}%  rating: {p.rating:.2f}  stock: {p.stock}",
        f"  {p.description}",
        f"  thumbnail: {p.thumbnail}",
    ]
    lines.extend(f"  image: {url}" for url in p.images)
    return lines


def render(state: object) -> tuple[list[str], int]:
    """Turn a final UI state into output lines and an exit code."""
    if isinstance(state, Loading):
        return ["Nothing to load."], 2
    if isinstance(state, Error):
        return [f"Error: {state.message}"], 1
    if isinstance(state, Success):
        data = state.data
        if isinstance(data, Product):
            return _format_detail(data), 0
        out: list[str] = []
        for item in data:
            out.append(_format_category(item) if isinstance(item, Category) else _format_product(item))
        return out, 0
    raise TypeError(f"Unexpected UI state: {state!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalog-browser", description="Browse the product catalogue.")
    parser.add_argument("--base-url", default=None, help="Catalogue service root (default from CATALOG_BASE_URL).")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write log records to this file.")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("categories", help="List categories.")
    p = sub.add_parser("products", help="List products in a category.")
    p.add_argument("category")
    d = sub.add_parser("product", help="Show one product.")
    d.add_argument("id", type=int)
    return parser


def _make_presenter(args: argparse.Namespace, repository: CatalogRepository) -> Presenter:
    if args.command == "categories":
        return CategoriesPresenter(GetCategoriesUseCase(repository))
    if args.command == "products":
        return CategoryProductsPresenter(GetProductsByCategoryUseCase(repository), args.category)
    return ProductDetailPresenter(GetProductByIdUseCase(repository), args.id)


async def run(args: argparse.Namespace, repository: CatalogRepository) -> tuple[list[str], int]:
    presenter = _make_presenter(args, repository)
    log.debug("Running %s", args.command)
    try:
        await presenter.join()
        return render(presenter.state.value)
    finally:
        presenter.dispose()


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    load_config()
    setup_logger(level=log_level(), log_file=args.log_file)
    repository = RemoteCatalogRepository(CatalogClient(base_url=args.base_url))
    lines, code = asyncio.run(run(args, repository))
    for line in lines:
        print(line)
    return code


if __name__ == "__main__":
    sys.exit(main())
