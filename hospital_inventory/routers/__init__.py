from hospital_inventory.routers.health import router as health_router
from hospital_inventory.routers.inventory import router as inventory_router

__all__ = [
    "health_router",
    "inventory_router",
]
