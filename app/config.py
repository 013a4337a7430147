from pathlib import Path

from pydantic_settings import BaseSettings

from app.schemas.currency import Currency

_DEFAULT_SITE_DIR = Path(__file__).resolve().parent.parent / "site"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    webhook_url: str = "https://primary-production-433c.up.railway.app/webhook/travel-hub-search"
    default_currency: Currency = Currency.INR
    price_decimals: int = 0
    site_dir: Path = _DEFAULT_SITE_DIR
    static_max_age: int = 86400
    toast_duration: float = 3.0
    toast_fade: float = 0.3
    max_toasts: int = 5
    search_delay: float = 0.8
    max_sessions: int = 1000
    session_cookie: str = "travelhub_session"
    log_level: str = "INFO"
