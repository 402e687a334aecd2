import uvicorn
from fastapi import FastAPI

from pos_api.common.handlers import register_error_handlers
from pos_api.common.logging import configure_logging
from pos_api.config import get_settings

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_title)
register_error_handlers(app)

from pos_api.products.routers import router as products_router
from pos_api.categories.routers import router as categories_router

app.include_router(products_router, prefix="/products", tags=["products"])
app.include_router(categories_router, prefix="/categories", tags=["categories"])


@app.get("/")
def read_root():
    """Root endpoint for the API.
    Returns:
        A simple message indicating the API is running.
    """
    return {"message": settings.app_title}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
