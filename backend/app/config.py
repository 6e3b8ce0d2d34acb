"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = os.getenv("APP_NAME", "Food Safety Audit Reports")
    REPORT_BRAND_NAME: str = os.getenv("REPORT_BRAND_NAME", "Food Safety Audit")

    # Scoring
    PASSING_GRADE: float = float(os.getenv("PASSING_GRADE", "83"))
    DEFAULT_COEFFICIENT: float = float(os.getenv("DEFAULT_COEFFICIENT", "2"))

    # Notifications
    NOTIFICATION_SENDER_EMAIL: str = os.getenv("NOTIFICATION_SENDER_EMAIL", "")
    DASHBOARD_URL: str = os.getenv("DASHBOARD_URL", "http://localhost:3001/auth/login")
    EMAIL_BODY_FORMAT: str = os.getenv("EMAIL_BODY_FORMAT", "html").lower()  # html | text

    # Microsoft Graph
    GRAPH_BASE_URL: str = os.getenv("GRAPH_BASE_URL", "https://graph.microsoft.com/v1.0")
    GRAPH_ACCESS_TOKEN: str = os.getenv("GRAPH_ACCESS_TOKEN", "")

    # HTTP client settings
    HTTP_TIMEOUT: int = int(os.getenv("HTTP_TIMEOUT", "15"))

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"])

settings = Settings()
