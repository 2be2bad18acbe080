"""Configuration management using python-dotenv."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


class DatabaseConfig:
    """SQLite storage configuration."""
    URL: str = os.getenv("DATABASE_URL", "sqlite:///stocks.db")
    ECHO: bool = os.getenv("DATABASE_ECHO", "false").lower() in ("1", "true", "yes")


class UpstreamConfig:
    """Eastmoney quote API configuration."""
    URL: str = os.getenv("UPSTREAM_URL", "https://push2.eastmoney.com/api/qt/stock/get")
    UT: str = os.getenv("UPSTREAM_UT", "fa5fd1943c7b386f172d6893dbfba10b")
    TIMEOUT: float = float(os.getenv("UPSTREAM_TIMEOUT", "5.0"))
    USER_AGENT: str = os.getenv(
        "UPSTREAM_USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    )
    REFERER: str = os.getenv("UPSTREAM_REFERER", "https://www.eastmoney.com/")


class AppConfig:
    """Application configuration."""
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))
    FAVICON_PATH: str = os.getenv("FAVICON_PATH", "favicon.ico")


# Singleton instances
database_config = DatabaseConfig()
upstream_config = UpstreamConfig()
app_config = AppConfig()
