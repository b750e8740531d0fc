"""
Wine Agent — Configuration: data source, LLM settings, query constants.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Data source — WINE_CSV_PATH wins over Google Sheets when set
# ---------------------------------------------------------------------------
GOOGLE_SHEET_ID = os.environ.get("GOOGLE_SHEET_ID", "")
GOOGLE_SHEET_NAME = os.environ.get("GOOGLE_SHEET_NAME", "Sheet1")
GOOGLE_SHEET_RANGE = os.environ.get("GOOGLE_SHEET_RANGE", "A:Q")
GOOGLE_CREDENTIALS_PATH = Path(
    os.environ.get("GOOGLE_APPLICATION_CREDENTIALS", "./credentials/service-account.json")
)
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]

WINE_CSV_PATH = os.environ.get("WINE_CSV_PATH", "")

REPORTS_FOLDER = Path(os.environ.get("WINE_REPORTS_DIR", str(Path.cwd() / "reports")))

# ---------------------------------------------------------------------------
# Chat agent
# ---------------------------------------------------------------------------
ANTHROPIC_API_KEY = os.environ.get("ANTHROPIC_API_KEY", "")
ANTHROPIC_MODEL = os.environ.get("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")
CHAT_MAX_TOKENS = int(os.environ.get("CHAT_MAX_TOKENS", "4096"))

# ---------------------------------------------------------------------------
# Header text that camel-casing would get wrong
# ---------------------------------------------------------------------------
COLUMN_OVERRIDES = {
    "ID": "id",
    "$": "price",
    "Purchased/ Provided": "purchasedProvided",
    "Temp (if not standard)": "temp",
}

# Joined in this order for full-text search
SEARCH_FIELDS = ["wineName", "brandName", "review", "ava", "region", "mainVarietal"]

# Stored instead of "" when the price cell is blank
PRICE_MISSING = "N/A"

# ---------------------------------------------------------------------------
# Query defaults
# ---------------------------------------------------------------------------
DEFAULT_LIMIT = 20
TOOL_RESULT_CAP = 20          # wines returned to the LLM per tool call
WEB_SCAN_LIMIT = 10000        # intermediate cap for the combined /api/search
WEB_DEFAULT_SORT = "rating"
