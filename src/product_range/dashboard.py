"""Streamlit dashboard for browsing a price range and its similar products."""
from __future__ import annotations

import argparse
import sys

import streamlit as st

from product_range.config import Settings
from product_range.exceptions import ProductRangeError
from product_range.logging_config import configure_logging
from product_range.range_service import RangeService, product_label, similarity_percentage
from product_range.repository import CatalogRepository


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument("--catalog")
    args, _ = parser.parse_known_args(argv)
    return args


@st.cache_resource
def get_service(catalog: str | None) -> RangeService:
    settings = Settings.load()
    configure_logging(settings.log_level)
    repository = CatalogRepository(
        catalog or settings.catalog_source, timeout=settings.request_timeout
    )
    return RangeService(repository=repository, k=settings.default_k)


def main() -> None:
    st.set_page_config(page_title="Price Range Product Finder", layout="wide")
    st.title("Price Range Product Finder")
    st.caption("Filter items between your desired price range")

    service = get_service(parse_args(sys.argv[1:]).catalog)

    min_price = st.sidebar.number_input("Starting Price", min_value=0.0, value=10000.0, step=500.0)
    max_price = st.sidebar.number_input("Ending Price", min_value=0.0, value=15000.0, step=500.0)

    try:
        in_range = service.products_in_range(min_price, max_price)
    except ProductRangeError as exc:
        st.error(str(exc))
        return

    left, right = st.columns(2)
    with left:
        st.subheader("Items in Price Range")
        if not in_range:
            st.info("No products found in this range.")
            return
        labels = {p.id: product_label(p) for p in in_range}
        anchor_id = st.radio("Select a product", options=list(labels), format_func=labels.get)

    with right:
        st.subheader("KNN Similar Products")
        neighbors = service.recommend(anchor_id)
        anchor = service.repository.get(anchor_id)
        st.markdown(f"Based on: **{anchor.name if anchor else anchor_id}**")
        if not neighbors:
            st.info("No similar products found.")
            return
        for rank, neighbor in enumerate(neighbors, start=1):
            product = neighbor.product
            similarity = similarity_percentage(neighbor.distance)
            with st.container():
                st.markdown(f"**{rank}. {product.name}** - {product.brand}")
                st.progress(similarity / 100, text=f"{similarity}%")
                c1, c2, c3, c4 = st.columns(4)
                c1.metric("Price", f"{product.price:,.0f}")
                c2.metric("Quality", f"{product.quality:g}/100")
                c3.metric("Rating", f"{product.rating:g}")
                c4.metric("Stock", product.stock)

        st.download_button(
            "Download CSV",
            service.summary(neighbors).to_csv(index=False).encode("utf-8"),
            file_name=f"similar_to_{anchor_id}.csv",
            mime="text/csv",
        )


if __name__ == "__main__":
    main()
