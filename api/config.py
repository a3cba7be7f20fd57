"""
API configuration and settings management.
"""
import os
from typing import Optional

class Config:
    """Application configuration."""
    
    # Catalog sources: SQLite listings table, or a JSON file if set
    DB_PATH: str = os.getenv("AUCTIONS_DB", "./data/db/auctions.db")
    CATALOG_JSON: Optional[str] = os.getenv("AUCTIONS_CATALOG_JSON") or None
    
    # API settings
    API_TITLE: str = "Auction Search API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Search, filter and paginate property and vehicle auction listings"
    
    # CORS settings
    CORS_ORIGINS: list = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list = ["*"]
    CORS_ALLOW_HEADERS: list = ["*"]
    
    # Pagination defaults
    DEFAULT_PAGE_SIZE: int = 30
    MAX_PAGE_SIZE: int = 500
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    @classmethod
    def validate(cls) -> None:
        """Validate configuration on startup."""
        if cls.CATALOG_JSON:
            if not os.path.exists(cls.CATALOG_JSON):
                raise FileNotFoundError(f"Catalog file not found: {cls.CATALOG_JSON}")
        elif not os.path.exists(cls.DB_PATH):
            raise FileNotFoundError(f"Database file not found: {cls.DB_PATH}")

# Global config instance
config = Config()
