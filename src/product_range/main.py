"""Command line interface for Product Range."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import Settings
from .exceptions import ProductRangeError
from .logging_config import configure_logging
from .range_service import RangeService, quality_label, similarity_percentage
from .repository import CatalogRepository

logger = logging.getLogger(__name__)


def build_service(args: argparse.Namespace) -> RangeService:
    settings = Settings.load()
    configure_logging(settings.log_level)
    repository = CatalogRepository(
        args.catalog or settings.catalog_source, timeout=settings.request_timeout
    )
    return RangeService(repository=repository, k=settings.default_k)


def cmd_neighbors(args: argparse.Namespace) -> None:
    service = build_service(args)
    neighbors = service.recommend(args.product_id, k=args.k)
    if not neighbors:
        print(f"No similar products found for product {args.product_id}")
    for rank, neighbor in enumerate(neighbors, start=1):
        product = neighbor.product
        print(
            f"{rank:>2}. [{product.id}] {product.name} ({product.brand}): "
            f"distance={neighbor.distance:.4f}, similarity={similarity_percentage(neighbor.distance)}%, "
            f"price={product.price}, quality={quality_label(product.quality)}"
        )
    if args.export:
        service.export_to_csv(neighbors, Path(args.export))
        print(f"Exported similar products to {args.export}")


def cmd_range(args: argparse.Namespace) -> None:
    service = build_service(args)
    products = service.products_in_range(args.min_price, args.max_price)
    if not products:
        print("No products found in this range.")
    for product in products:
        print(
            f"[{product.id}] {product.name} ({product.describe()}): "
            f"price={product.price}, rating={product.rating}/5, {quality_label(product.quality)}"
        )


def cmd_dashboard(args: argparse.Namespace) -> None:
    import subprocess

    script_path = Path(__file__).resolve().parent / "dashboard.py"
    command = ["streamlit", "run", str(script_path)]
    if args.catalog:
        command += ["--", "--catalog", args.catalog]
    subprocess.run(command, check=False)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find similar products in a static catalog")
    parser.add_argument("--catalog", help="Catalog JSON file or URL (overrides configuration)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    neighbors_parser = subparsers.add_parser(
        "neighbors", help="List the products most similar to a product id"
    )
    neighbors_parser.add_argument("product_id", type=int, help="Anchor product id")
    neighbors_parser.add_argument("--k", type=int, default=None, help="Number of neighbours")
    neighbors_parser.add_argument("--export", help="Export results to CSV at this path")
    neighbors_parser.set_defaults(func=cmd_neighbors)

    range_parser = subparsers.add_parser("range", help="List products within a price range")
    range_parser.add_argument("min_price", type=float)
    range_parser.add_argument("max_price", type=float)
    range_parser.set_defaults(func=cmd_range)

    dashboard_parser = subparsers.add_parser("dashboard", help="Launch the Streamlit dashboard")
    dashboard_parser.set_defaults(func=cmd_dashboard)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ProductRangeError as exc:
        logger.error("%s", exc)
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
