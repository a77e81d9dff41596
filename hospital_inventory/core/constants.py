from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parents[1]
PROJECT_ROOT = PACKAGE_DIR.parent

TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

INVENTORY_PATH = "/api/hospital/inventory"

# Quantity ladder: strictly above these counts.
QUANTITY_HIGH_ABOVE = 50
QUANTITY_MEDIUM_ABOVE = 20

# Expiry ladder: at or below these many days remaining.
EXPIRY_URGENT_DAYS = 30
EXPIRY_WARNING_DAYS = 60

EXPIRATION_DISPLAY_FORMAT = "%m/%d/%Y"
