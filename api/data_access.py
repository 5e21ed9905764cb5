"""
Data access layer for the product transactions database.
Computes the monthly aggregates served by the API directly in SQL.
"""

from typing import Dict, List, Optional

from database import DatabaseManager


# (label, lower bound exclusive, upper bound inclusive); the first bucket
# also includes 0 and everything outside these ranges falls into OVERFLOW_RANGE
PRICE_RANGES = [
    ("0 - 100", None, 100),
    ("101 - 200", 100, 200),
    ("201 - 300", 200, 300),
    ("301 - 400", 300, 400),
    ("401 - 500", 400, 500),
    ("501 - 600", 500, 600),
    ("601 - 700", 600, 700),
    ("701 - 800", 700, 800),
    ("801 - 900", 800, 900),
]
OVERFLOW_RANGE = "901 - above"


def _price_range_case() -> str:
    """SQL CASE expression mapping `price` to its bucket label."""
    whens = []
    for label, low, high in PRICE_RANGES:
        if low is None:
            cond = f"price >= 0 AND price <= {high}"
        else:
            cond = f"price > {low} AND price <= {high}"
        whens.append(f"WHEN {cond} THEN '{label}'")
    return "CASE " + " ".join(whens) + f" ELSE '{OVERFLOW_RANGE}' END"


def price_range_label(price: float) -> str:
    """Bucket label for a single price, matching the SQL CASE expression."""
    for label, low, high in PRICE_RANGES:
        lower_ok = price >= 0 if low is None else price > low
        if lower_ok and price <= high:
            return label
    return OVERFLOW_RANGE


class TransactionDataProvider:
    """
    Monthly aggregates over product transactions.

    Wraps a DatabaseManager owned by the caller; the provider never closes it.
    `month` is a two-digit string ('01'..'12'). Values that match no row,
    including None, simply produce empty aggregates.
    """

    def __init__(self, db: DatabaseManager):
        self.db = db

    @property
    def db_path(self) -> str:
        return self.db.db_path

    # ----------------------------------------------------------------
    # Aggregates
    # ----------------------------------------------------------------

    def get_statistics(self, month: Optional[str]) -> Dict:
        """
        Totals for a month.

        Returns:
            Dict with totalItems, totalSaleAmount, totalSoldItems,
            totalNotSoldItems. totalSaleAmount is None when no rows match.
        """
        sql = """
            SELECT
                COUNT(*) AS totalItems,
                SUM(price) AS totalSaleAmount,
                COUNT(CASE WHEN sold = 1 THEN 1 END) AS totalSoldItems,
                COUNT(CASE WHEN sold = 0 THEN 1 END) AS totalNotSoldItems
            FROM products
            WHERE sale_month(dateOfSale) = ?
        """
        cur = self.db.conn.execute(sql, (month,))
        return dict(cur.fetchone())

    def get_bar_chart(self, month: Optional[str]) -> List[Dict]:
        """Item count per price range, empty ranges omitted, ordered by label."""
        sql = f"""
            SELECT
                {_price_range_case()} AS priceRange,
                COUNT(*) AS itemCount
            FROM products
            WHERE sale_month(dateOfSale) = ?
            GROUP BY priceRange
            ORDER BY priceRange
        """
        cur = self.db.conn.execute(sql, (month,))
        return [dict(row) for row in cur.fetchall()]

    def get_pie_chart(self, month: Optional[str]) -> List[Dict]:
        """Item count per category."""
        sql = """
            SELECT category, COUNT(*) AS itemCount
            FROM products
            WHERE sale_month(dateOfSale) = ?
            GROUP BY category
        """
        cur = self.db.conn.execute(sql, (month,))
        return [dict(row) for row in cur.fetchall()]

    def get_combined(self, month: Optional[str]) -> Dict:
        """All three aggregates for a month. Any failure propagates."""
        return {
            "statistics": self.get_statistics(month),
            "barChart": self.get_bar_chart(month),
            "pieChart": self.get_pie_chart(month),
        }

    # ----------------------------------------------------------------
    # Database info
    # ----------------------------------------------------------------

    def get_database_stats(self) -> Dict:
        return {"products": self.db.count_products()}
