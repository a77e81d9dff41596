import importlib

from hospital_inventory.models.department import Department
from hospital_inventory.models.hospital import Hospital
from hospital_inventory.models.inventory import InventoryRecord
from hospital_inventory.models.item import Item


def import_all_models() -> None:
    for module_name in (
        "hospital_inventory.models.department",
        "hospital_inventory.models.hospital",
        "hospital_inventory.models.inventory",
        "hospital_inventory.models.item",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Department",
    "Hospital",
    "InventoryRecord",
    "Item",
    "import_all_models",
]
