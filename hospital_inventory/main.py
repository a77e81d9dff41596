from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from hospital_inventory.config import Settings, cors_origins, get_settings
from hospital_inventory.core.constants import STATIC_DIR
from hospital_inventory.core.exceptions import register_exception_handlers
from hospital_inventory.core.logging import setup_logging
from hospital_inventory.database import create_tables, dispose_engine
from hospital_inventory.routers import health_router, inventory_router

setup_logging()
settings: Settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    create_tables()
    try:
        yield
    finally:
        dispose_engine()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(settings),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
register_exception_handlers(app)

app.include_router(health_router)
app.include_router(inventory_router)


__all__ = ["app"]


if __name__ == "__main__":
    uvicorn.run("hospital_inventory.main:app", host="0.0.0.0", port=8000, reload=True)
