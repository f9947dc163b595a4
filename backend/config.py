"""
Central configuration for the CMS backend.

All settings loaded from .env file or environment variables.
See .env.example for available options.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from backend directory
load_dotenv(Path(__file__).parent / ".env")

# Spreadsheet store endpoint (single RPC-style URL, every action is a POST)
SHEETS_API_URL = os.getenv("SHEETS_API_URL", "")
SHEETS_API_KEY = os.getenv("SHEETS_API_KEY", "sheets-cms-secret-key")

# Completion service (OpenAI-compatible chat completions)
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4")

# Draft generation quota per rolling hour
RATE_LIMIT_PER_HOUR = int(os.getenv("RATE_LIMIT_PER_HOUR", 100))

# Snapshots kept per page
MAX_PAGE_VERSIONS = int(os.getenv("MAX_PAGE_VERSIONS", 20))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Comma separated list, "*" allows any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
