"""
Script to check the product catalog file.
Run: python -m scripts.check_catalog [query]
"""

import sys
sys.path.insert(0, '.')

from salesbot.config import settings
from salesbot.core.catalog import CatalogIndex
from salesbot.core.errors import LoadError


def main():
    try:
        catalog = CatalogIndex.parse(settings.catalog_path)
    except LoadError as e:
        print(f"❌ {e}")
        sys.exit(1)

    print(f"Total products: {len(catalog)}\n")

    # Show all categories
    print("=" * 50)
    print("ALL CATEGORIES IN CATALOG:")
    print("=" * 50)

    for category in catalog.categories():
        products = [p for p in catalog if p.category == category]
        print(f"\n{category}: {len(products)} products")
        for p in products[:5]:
            print(f"  - [{p.id}] {p.name}: {p.price} {p.currency}")
        if len(products) > 5:
            print(f"  ... and {len(products) - 5} more")

    # Optional search
    if len(sys.argv) > 1:
        query = " ".join(sys.argv[1:])
        print("\n" + "=" * 50)
        print(f"SEARCHING FOR '{query}':")
        print("=" * 50)
        for p in catalog.match(query, settings.recommend_limit):
            print(f"  - [{p.id}] {p.name} ({p.category}) tags={list(p.tags)}")


if __name__ == "__main__":
    main()
