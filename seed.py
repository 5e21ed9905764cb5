"""
One-time seed import of product transactions.

Fetches the product transaction JSON array from the remote dataset and
inserts it into the `products` table. The import only runs when the table
did not exist before, so restarting the service on a populated database
leaves existing rows untouched.

Usage:
    python seed.py                                # Default DB path and dataset URL
    python seed.py --db data/other.db             # Specific database file
    python seed.py --url https://example.com/x    # Alternate dataset
"""

import argparse
import sqlite3
import sys
from pathlib import Path
from typing import List, Optional

sys.path.append(str(Path(__file__).parent))

import requests

from api.config import settings
from database import DatabaseManager
from models import ProductSale
from utils import log

logger = log.setup_verbose_logging("seed")


def fetch_products(
    url: str,
    timeout: float = settings.SEED_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> List[ProductSale]:
    """
    Download the seed dataset.

    Args:
        url: Location of a JSON array of product transactions
        timeout: Request timeout in seconds
        session: Optional requests session (module-level requests otherwise)

    Returns:
        List of ProductSale records in source order

    Raises:
        requests.RequestException: on network failure or HTTP error status
        ValueError: if the body is not a JSON array
        TypeError: if an element is not a JSON object
    """
    client = session or requests
    response = client.get(url, timeout=timeout)
    response.raise_for_status()

    data = response.json()
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array from {url}, got {type(data).__name__}")
    return [ProductSale(**item) for item in data]


def seed_products(
    db: DatabaseManager,
    url: str = settings.SEED_URL,
    timeout: float = settings.SEED_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> int:
    """
    Fetch the dataset and insert it. Failures are logged, not raised.

    Returns:
        Number of rows inserted (0 on failure)
    """
    log.step(f"Fetching seed data from {url}")
    try:
        products = fetch_products(url, timeout=timeout, session=session)
        n = db.insert_products(products)
    except (requests.RequestException, ValueError, TypeError, sqlite3.Error) as e:
        logger.error(f"Error fetching seed data from {url}: {e}")
        log.err("Seed import failed, table left empty")
        return 0

    logger.info(f"Database initialized with seed data: {n} rows")
    log.ok(f"Inserted {n} products")
    return n


def ensure_seeded(
    db: DatabaseManager,
    url: str = settings.SEED_URL,
    timeout: float = settings.SEED_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> int:
    """
    Create the products table and seed it, only if the table is new.

    Returns:
        Number of rows inserted by this call
    """
    if not db.ensure_schema():
        logger.info("Table 'products' already exists. Skipping seed import.")
        return 0
    return seed_products(db, url=url, timeout=timeout, session=session)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the product transactions database")
    parser.add_argument("--db", default=settings.DB_PATH, help="SQLite database file")
    parser.add_argument("--url", default=settings.SEED_URL, help="Seed dataset URL")
    args = parser.parse_args(argv)

    log.header("SEED IMPORT: Product Transactions")
    db = DatabaseManager(db_path=args.db, timeout=settings.DB_TIMEOUT)
    try:
        inserted = ensure_seeded(db, url=args.url)
        total = db.count_products()
    finally:
        db.close()

    log.summary_table("Summary", [
        ("Database", args.db),
        ("Inserted", str(inserted)),
        ("Total rows", str(total)),
    ])
    return 0


if __name__ == "__main__":
    sys.exit(main())
