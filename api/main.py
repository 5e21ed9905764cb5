"""
FastAPI application for the Product Transaction Statistics API.

Seeds the products table on first start, then serves monthly aggregates.
Auto-generated OpenAPI documentation at /docs.
"""

from contextlib import asynccontextmanager
from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from database import DatabaseManager
from seed import ensure_seeded

from .config import settings
from .data_access import TransactionDataProvider
from .models import (
    StatisticsResponse,
    PriceRangeItem,
    CategoryItem,
    CombinedResponse,
    HealthResponse,
    ErrorResponse
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {500: {"model": ErrorResponse}}

MONTH_DESCRIPTION = "Two-digit month of sale (01-12)"


def _server_error() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def get_data(request: Request) -> TransactionDataProvider:
    """Data provider owned by the running application."""
    return request.app.state.data


router = APIRouter()


# ----------------------------------------------------------------
# Health & Info
# ----------------------------------------------------------------

@router.get("/", response_model=HealthResponse, tags=["Health"])
def root(data: TransactionDataProvider = Depends(get_data)):
    """
    API health check and information.

    Returns service status and database statistics.
    """
    try:
        stats = data.get_database_stats()
        return {
            "service": settings.API_TITLE,
            "version": settings.API_VERSION,
            "status": "healthy",
            "database_path": data.db_path,
            "database_stats": stats
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return _server_error()


# ----------------------------------------------------------------
# Monthly Aggregates
# ----------------------------------------------------------------

@router.get(
    "/api/statistics",
    response_model=StatisticsResponse,
    responses=ERROR_RESPONSES,
    tags=["Statistics"]
)
def get_statistics(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    data: TransactionDataProvider = Depends(get_data)
):
    """
    Total sale amount, sold and not sold item counts for a month.

    **totalSaleAmount** is null when no sale matches the month.
    """
    try:
        return data.get_statistics(month)
    except Exception as e:
        logger.error(f"Error executing statistics query for month {month}: {e}")
        return _server_error()


@router.get(
    "/api/bar-chart",
    response_model=List[PriceRangeItem],
    responses=ERROR_RESPONSES,
    tags=["Charts"]
)
def get_bar_chart(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    data: TransactionDataProvider = Depends(get_data)
):
    """
    Number of items per price range for a month.

    Ranges without items are omitted; the rest are ordered by label.
    """
    try:
        return data.get_bar_chart(month)
    except Exception as e:
        logger.error(f"Error executing bar chart query for month {month}: {e}")
        return _server_error()


@router.get(
    "/api/pie-chart",
    response_model=List[CategoryItem],
    responses=ERROR_RESPONSES,
    tags=["Charts"]
)
def get_pie_chart(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    data: TransactionDataProvider = Depends(get_data)
):
    """Number of items per category for a month."""
    try:
        return data.get_pie_chart(month)
    except Exception as e:
        logger.error(f"Error executing pie chart query for month {month}: {e}")
        return _server_error()


@router.get(
    "/api/combined-data",
    response_model=CombinedResponse,
    responses=ERROR_RESPONSES,
    tags=["Statistics"]
)
def get_combined_data(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    data: TransactionDataProvider = Depends(get_data)
):
    """
    Statistics, bar chart and pie chart for a month in one response.

    All three are computed together; if any of them fails no partial
    data is returned.
    """
    try:
        return data.get_combined(month)
    except Exception as e:
        logger.error(f"Error building combined data for month {month}: {e}")
        return _server_error()


# ----------------------------------------------------------------
# Application
# ----------------------------------------------------------------

def create_app(db_path: Optional[str] = None, seed_url: Optional[str] = None) -> FastAPI:
    """
    Build the API application.

    The database handle is opened (and seeded if the table is new) on
    startup and closed on shutdown.

    Args:
        db_path: SQLite file (defaults to config setting)
        seed_url: Seed dataset URL (defaults to config setting)
    """
    db_path = db_path or settings.DB_PATH
    seed_url = seed_url or settings.SEED_URL

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = DatabaseManager(db_path=db_path, timeout=settings.DB_TIMEOUT)
        try:
            logger.info(f"Connected to database: {db.db_path}")
            # Seed download is blocking
            await run_in_threadpool(ensure_seeded, db, url=seed_url)
            app.state.data = TransactionDataProvider(db)
            yield
        finally:
            db.close()
            logger.info("Database connection closed")

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level="info"
    )
