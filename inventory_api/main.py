# Main application file



import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from inventory_api.core.config import settings
from inventory_api.core.exceptions import (
    ConsistencyError,
    InsufficientStockError,
    InventoryError,
    NotFoundError,
    ValidationError,
)
from inventory_api.core.rate_limiter import limiter
from inventory_api.routers import (
    auth,
    brands,
    categories,
    dashboard,
    inventory,
    products,
    purchases,
    sales,
    sellers,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("inventory_api")


# APP INIT

app = FastAPI(
    title="Inventory Management API",
    description="Products, brands, categories, sellers, purchases and sales with stock kept in step",
    version="1.0.0",
)



# CORS

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler
)
app.add_middleware(SlowAPIMiddleware)


# INVENTORY ERRORS

ERROR_STATUS = {
    NotFoundError: 404,
    InsufficientStockError: 409,
    ValidationError: 400,
    ConsistencyError: 500,
}


async def inventory_error_handler(request: Request, exc: InventoryError):
    status_code = ERROR_STATUS.get(type(exc), 400)

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "code": exc.code,
            "message": exc.message,
        },
    )


app.add_exception_handler(InventoryError, inventory_error_handler)


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# ROUTERS

app.include_router(auth.router)
app.include_router(products.router)
app.include_router(brands.router)
app.include_router(categories.router)
app.include_router(sellers.router)
app.include_router(purchases.router)
app.include_router(sales.router)
app.include_router(inventory.router)
app.include_router(dashboard.router)



# HEALTH

@app.get("/health")
def health():
    logger.info("Health check endpoint called")
    return {
        "status": "OK",
        "message": "Inventory Management API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENV,
    }
