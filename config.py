"""Configuration values for the issues sync."""

import os
from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))  # repo root where config.py lives
ENV_PATH = os.path.join(BASE_DIR, ".env")
if os.path.exists(ENV_PATH):
    load_dotenv(dotenv_path=ENV_PATH, override=False)
else:
    load_dotenv(override=False)  # fallback to process/working-dir envs

# --- Action inputs: name -> local .env fallback ---
INPUT_SERVICE_ACCOUNT_JSON = "google-api-service-account-credentials"
INPUT_DOCUMENT_ID = "document-id"
INPUT_SHEET_NAME = "sheet-name"
INPUT_GITHUB_TOKEN = "github-token"

REQUIRED_INPUTS = {
    INPUT_SERVICE_ACCOUNT_JSON: "GOOGLE_SERVICE_ACCOUNT_JSON",
    INPUT_DOCUMENT_ID: "GOOGLE_SHEET_ID",
    INPUT_SHEET_NAME: "SHEET_NAME",
}

# --- GitHub ---
GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")
GITHUB_GRAPHQL_URL = os.environ.get("GITHUB_GRAPHQL_URL", "")  # empty -> <api>/graphql
GITHUB_API_VERSION = "2022-11-28"
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "30"))
USER_AGENT = "issues-sheet-sync"

# --- Projects (v2) fields read per issue ---
STATUS_FIELD = "Status"
STORY_POINTS_FIELD = "Story Points"
PROJECT_ITEMS_LIMIT = 10

# --- Google Sheets ---
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
VALUE_INPUT_OPTION = "USER_ENTERED"

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")  # INFO|DEBUG
LOG_BULLET_ITEM = "·"
