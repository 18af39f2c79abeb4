from pathlib import Path
from dotenv import load_dotenv
import os

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent

APP_TITLE = os.getenv("APP_TITLE", "Contact Manager")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

TEMPLATE_DIR = os.getenv("TEMPLATE_DIR", str(PACKAGE_DIR / "templates"))

# seed the default store with the three sample contacts
SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "1") == "1"

FLASH_COOKIE = os.getenv("FLASH_COOKIE", "contact_manager_flash")
