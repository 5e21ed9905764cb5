"""
SQLite database layer for the product transaction statistics service.

Owns the connection to the single `products` table. The table is created at
most once per database file; `ensure_schema()` reports whether this call
created it so the seeder can import the remote dataset exactly once.

Usage:
    from database import DatabaseManager
    db = DatabaseManager("data/transactions.db")
    if db.ensure_schema():
        db.insert_products(products)
"""

import datetime
import os
import sqlite3
import sys
from pathlib import Path
from typing import Iterable, Optional

sys.path.append(str(Path(__file__).parent))

from models import PRODUCT_COLUMNS, ProductSale


BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(BASE_DIR, "data")
DEFAULT_DB_PATH = os.path.join(DATA_DIR, "transactions.db")

PRODUCTS_TABLE = "products"


# ---------------------------------------------------------------------------
# Schema DDL
# ---------------------------------------------------------------------------

SCHEMA_SQL = """
CREATE TABLE products (
    id          INTEGER PRIMARY KEY,
    title       TEXT,
    price       REAL,
    description TEXT,
    category    TEXT,
    image       TEXT,
    sold        INTEGER,
    dateOfSale  TEXT
)
"""


# ---------------------------------------------------------------------------
# Month extraction
# ---------------------------------------------------------------------------

def parse_sale_month(value: Optional[str]) -> Optional[str]:
    """
    Calendar month of a dateOfSale string as two digits ('01'..'12').

    The timestamp is read as written, without converting its UTC offset.
    Returns None for NULL or unparseable values.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.datetime.fromisoformat(text)
    except ValueError:
        return None
    return f"{parsed.month:02d}"


class DatabaseManager:
    """SQLite database manager for product sale records."""

    def __init__(self, db_path: str = DEFAULT_DB_PATH, timeout: float = 30):
        parent = os.path.dirname(db_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.db_path = db_path
        # Shared by FastAPI's worker threads; no write path exists after seeding
        self.conn = sqlite3.connect(db_path, timeout=timeout, check_same_thread=False)
        self.conn.execute("PRAGMA journal_mode=WAL")
        self.conn.row_factory = sqlite3.Row
        self.conn.create_function("sale_month", 1, parse_sale_month, deterministic=True)

    def close(self):
        self.conn.close()

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    def table_exists(self, name: str) -> bool:
        cur = self.conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
            (name,)
        )
        return cur.fetchone() is not None

    def ensure_schema(self) -> bool:
        """
        Create the products table if it does not exist yet.

        Returns:
            True if the table was created by this call, False if it was
            already present.
        """
        if self.table_exists(PRODUCTS_TABLE):
            return False
        self.conn.execute(SCHEMA_SQL)
        self.conn.commit()
        return True

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def insert_products(self, products: Iterable[ProductSale]) -> int:
        """Insert ProductSale records in one transaction. Returns count inserted."""
        placeholders = ", ".join("?" for _ in PRODUCT_COLUMNS)
        sql = f"""
            INSERT INTO products ({", ".join(PRODUCT_COLUMNS)})
            VALUES ({placeholders})
        """
        rows = [p.as_row() for p in products]
        if not rows:
            return 0
        with self.conn:
            self.conn.executemany(sql, rows)
        return len(rows)

    def count_products(self) -> int:
        cur = self.conn.execute("SELECT COUNT(*) FROM products")
        return cur.fetchone()[0]

    # ------------------------------------------------------------------
    # Generic query
    # ------------------------------------------------------------------

    def query(self, sql: str, params: tuple = ()) -> list[dict]:
        """Execute a raw SQL query and return results as list of dicts."""
        cur = self.conn.execute(sql, params)
        return [dict(r) for r in cur.fetchall()]
