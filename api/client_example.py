"""
Example client for the Product Transaction Statistics API.

Demonstrates how a dashboard or script can read the monthly aggregates.
"""

import requests
from typing import Dict, List


class TransactionStatsClient:
    """
    Client for the Product Transaction Statistics API.

    Usage:
        client = TransactionStatsClient("http://localhost:3000")
        stats = client.get_statistics("03")
        chart = client.get_bar_chart("03")
    """

    def __init__(self, api_url: str = "http://localhost:3000"):
        """
        Initialize API client.

        Args:
            api_url: Base URL of the API server
        """
        self.api_url = api_url.rstrip('/')
        self.session = requests.Session()

    def _get(self, endpoint: str, params: Dict = None):
        """Make GET request to API."""
        url = f"{self.api_url}{endpoint}"
        response = self.session.get(url, params=params)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> Dict:
        """Check API health and get the stored product count."""
        return self._get("/")

    # ----------------------------------------------------------------
    # Monthly Aggregates
    # ----------------------------------------------------------------

    def get_statistics(self, month: str) -> Dict:
        """
        Totals for a month.

        Args:
            month: Two-digit month (e.g., '03')

        Returns:
            Dict with totalItems, totalSaleAmount, totalSoldItems, totalNotSoldItems
        """
        return self._get("/api/statistics", {"month": month})

    def get_bar_chart(self, month: str) -> List[Dict]:
        """Price range buckets with their item counts."""
        return self._get("/api/bar-chart", {"month": month})

    def get_pie_chart(self, month: str) -> List[Dict]:
        """Categories with their item counts."""
        return self._get("/api/pie-chart", {"month": month})

    def get_combined_data(self, month: str) -> Dict:
        return self._get("/api/combined-data", {"month": month})


# ----------------------------------------------------------------
# Example Usage
# ----------------------------------------------------------------

if __name__ == "__main__":
    client = TransactionStatsClient("http://localhost:3000")

    print("=" * 60)
    print("Product Transaction Statistics API - Client Examples")
    print("=" * 60)

    print("\n1. Health Check")
    health = client.health_check()
    print(f"   Service: {health['service']}")
    print(f"   Status: {health['status']}")
    print(f"   Products: {health['database_stats']['products']}")

    print("\n2. March Statistics")
    stats = client.get_statistics("03")
    print(f"   Items: {stats['totalItems']}")
    print(f"   Sale amount: {stats['totalSaleAmount']}")
    print(f"   Sold / not sold: {stats['totalSoldItems']} / {stats['totalNotSoldItems']}")

    print("\n3. March Price Ranges")
    for bucket in client.get_bar_chart("03"):
        print(f"   {bucket['priceRange']:>12}: {bucket['itemCount']}")

    print("\n4. March Categories")
    for slice_ in client.get_pie_chart("03"):
        print(f"   {slice_['category']}: {slice_['itemCount']}")

    print("\n" + "=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
