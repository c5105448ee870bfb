import os
import logging
from pydantic import BaseModel, Field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

class Config(BaseModel):
    app_name: str = "Employee Records API"
    environment: str = os.getenv("APP_ENV", "development")
    version: str = "1.0.0"
    port: int = int(os.getenv("PORT", "3000"))

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./employees.db")

    # Bootstrap admin account (seeded at startup if missing)
    admin_username: str = os.getenv("ADMIN_USERNAME", "aayushi")
    admin_password: Optional[str] = os.getenv("ADMIN_PASSWORD")

    # File storage
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    uploads_url_prefix: str = "/uploads"
    max_upload_mb: int = int(os.getenv("MAX_UPLOAD_MB", "10"))

    # Static client
    public_dir: str = os.getenv("PUBLIC_DIR", "public")

    request_id_header: str = "X-Request-ID"
    login_rate_limit: str = os.getenv("LOGIN_RATE_LIMIT", "30/minute")

    # CORS: comma-separated origins loaded from env, "*" allows any origin.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv("CORS_ORIGINS", "*").split(",")
            if o.strip()
        ]
    )

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

settings = Config()

# --- Startup Validation for Production ---
_logger = logging.getLogger(__name__)
if settings.environment not in ("development", "testing"):
    if not settings.admin_password:
        raise RuntimeError(
            "FATAL: ADMIN_PASSWORD must be set for non-development environments. "
            "Set it as an environment variable."
        )
elif not settings.admin_password:
    _logger.warning("⚠ ADMIN_PASSWORD not set; the default admin account will use 'admin'.")
