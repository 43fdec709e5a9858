from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    app_title: str = os.getenv("GRADECALC_TITLE", "SPI and CPI Calculator")
    web_mode: bool = _env_flag(os.getenv("GRADECALC_WEB", "0"))
    port: int = int(os.getenv("PORT", "8550"))
    log_level: str = os.getenv("GRADECALC_LOG_LEVEL", "INFO").upper()


settings = Settings()
