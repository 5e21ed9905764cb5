"""
Configuration management for the Product Transaction Statistics API.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / ".env")


class Settings:
    """API server configuration."""

    # Paths
    BASE_DIR: Path = Path(__file__).parent.parent
    DB_PATH: str = os.getenv("TXN_DB_PATH", str(BASE_DIR / "data" / "transactions.db"))

    # Server
    API_TITLE: str = "Product Transaction Statistics API"
    API_DESCRIPTION: str = "Monthly sales statistics, price-range and category charts"
    API_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS
    CORS_ORIGINS: List[str] = ["*"]  # Allow all origins (restrict in production)

    # Database
    DB_TIMEOUT: int = 30  # SQLite connection timeout in seconds

    # Seed import
    SEED_URL: str = os.getenv(
        "TXN_SEED_URL",
        "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
    )
    SEED_TIMEOUT: int = int(os.getenv("TXN_SEED_TIMEOUT", "30"))


settings = Settings()
