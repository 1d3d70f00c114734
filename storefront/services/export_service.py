# storefront/services/export_service.py
from xml.sax.saxutils import escape

from sqlmodel import Session

from storefront.models.product import Product
from storefront.repositories.product_repo import ProductRepository

CSV_FILENAME = "classic_polo_products.csv"

CSV_HEADERS = [
    "ID", "SKU", "Name", "Description", "Category", "Subcategory",
    "Price", "Original Price", "Fabric", "Fit", "Colors", "Sizes",
    "Images", "Tags", "In Stock", "Stock Count", "Product Link",
]

# Storefront pages listed ahead of the product pages.
# (path, changefreq, priority)
SITEMAP_PAGES: list[tuple[str, str, str]] = [
    ("", "daily", "1.0"),
    ("/products", "daily", "0.9"),
    ("/all-products", "daily", "0.9"),
    ("/products/Men", "weekly", "0.8"),
    ("/products/Women", "weekly", "0.8"),
    ("/products/Kids", "weekly", "0.8"),
    ("/products/Accessories", "weekly", "0.8"),
]


def _quoted(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _joined(values: list[str] | None) -> str:
    return _quoted(", ".join(values or []))


class ExportService:
    """
    Catalog exports: CSV download, sitemap.xml and robots.txt.

    `base_url` is the public origin of the storefront without a trailing
    slash, e.g. "https://shop.example.com".
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    @staticmethod
    def _csv_row(product: Product, base_url: str) -> list[str]:
        return [
            str(product.id),
            product.sku,
            _quoted(product.name),
            _quoted(product.description or ""),
            product.category,
            product.subcategory or "",
            product.price,
            product.original_price or "",
            product.fabric or "",
            product.fit or "",
            _joined(product.colors),
            _joined(product.sizes),
            _joined(product.images),
            _joined(product.tags),
            "Yes" if product.in_stock else "No",
            str(product.stock_count or 0),
            _quoted(f"{base_url}/product/{product.id}"),
        ]

    def products_csv(self, session: Session, base_url: str) -> str:
        """
        Render the whole catalog as CSV (header row first, "\\n" line ends).

        Free text and multi-valued columns are always double-quoted.
        """
        lines = [",".join(CSV_HEADERS)]
        for product in self.repo.get_all(session):
            lines.append(",".join(self._csv_row(product, base_url)))
        return "\n".join(lines)

    def sitemap_xml(self, session: Session, base_url: str) -> str:
        entries = [(f"{base_url}{path}", freq, prio) for path, freq, prio in SITEMAP_PAGES]
        entries.extend(
            (f"{base_url}/product/{product.id}", "weekly", "0.7")
            for product in self.repo.get_all(session)
        )

        urls = "\n".join(
            "  <url>\n"
            f"    <loc>{escape(loc)}</loc>\n"
            f"    <changefreq>{freq}</changefreq>\n"
            f"    <priority>{prio}</priority>\n"
            "  </url>"
            for loc, freq, prio in entries
        )
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
            f"{urls}\n"
            "</urlset>"
        )

    @staticmethod
    def robots_txt(base_url: str) -> str:
        return (
            "User-agent: *\n"
            "Allow: /\n"
            "Disallow: /api/\n"
            "Disallow: /admin/\n"
            "\n"
            f"Sitemap: {base_url}/sitemap.xml"
        )
