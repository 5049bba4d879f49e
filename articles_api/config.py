import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Base paths
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"

# SQLite database holding the articles table
DATABASE_PATH = Path(os.getenv("ARTICLES_DB_PATH", str(DATA_DIR / "articles.db")))

# Daily access/error log files are written here
LOG_DIR = Path(os.getenv("ARTICLES_LOG_DIR", str(BASE_DIR / "logs")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Request body limits
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", str(1024 * 1024)))  # 1 MB
BODY_READ_TIMEOUT = float(os.getenv("BODY_READ_TIMEOUT", "10"))  # seconds

# Environment. Raw error messages are only returned to clients in development.
APP_ENV = os.getenv("APP_ENV", "production").lower()
EXPOSE_ERROR_DETAILS = os.getenv(
    "EXPOSE_ERROR_DETAILS", "true" if APP_ENV == "development" else "false"
).lower() == "true"

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
