"""Benchmark xmlprint against xml.etree.ElementTree serialization.

Run with:
    python benchmarks/benchmark_vs_etree.py
"""

import time
import xml.etree.ElementTree as ET

from xmlprint import Attribute, Data, Document, Element, PrintFlags, to_string


def build_xmlprint_tree(items: int) -> Document:
    """Catalog with ``items`` entries, each with attributes and text."""
    return Document(
        children=(
            Element(
                "catalog",
                children=tuple(
                    Element(
                        "item",
                        attributes=(Attribute("id", str(i)), Attribute("kind", "book")),
                        children=(
                            Element("title", children=(Data(f"Title {i} & <subtitle>"),)),
                            Element("price", value=f"{i}.99"),
                        ),
                    )
                    for i in range(items)
                ),
            ),
        )
    )


def build_etree(items: int) -> ET.Element:
    """Same catalog as an ElementTree."""
    root = ET.Element("catalog")
    for i in range(items):
        item = ET.SubElement(root, "item", id=str(i), kind="book")
        ET.SubElement(item, "title").text = f"Title {i} & <subtitle>"
        ET.SubElement(item, "price").text = f"{i}.99"
    return root


def benchmark(fn, iterations: int = 20) -> float:  # type: ignore[no-untyped-def]
    """Average seconds per call after a short warmup."""
    for _ in range(3):
        fn()
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - start) / iterations


def main() -> None:
    for items in (100, 1_000, 10_000):
        doc = build_xmlprint_tree(items)
        root = build_etree(items)

        indented = benchmark(lambda: to_string(doc))
        compact = benchmark(lambda: to_string(doc, PrintFlags.NO_INDENTING))
        etree = benchmark(lambda: ET.tostring(root, encoding="unicode"))

        print(f"{items:>6} items")
        print(f"  xmlprint (indented): {indented * 1000:8.2f} ms")
        print(f"  xmlprint (compact):  {compact * 1000:8.2f} ms")
        print(f"  ElementTree:         {etree * 1000:8.2f} ms")


if __name__ == "__main__":
    main()
