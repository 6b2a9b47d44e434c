"""Global settings for SneakerSpider."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    source_url: str = "https://solecollector.com/sneaker-release-dates/all-release-dates"
    provider: str = "SOLECOLLECTOR"
    release_year: int = 2019
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    timeout: Optional[int] = None
    host: str = "0.0.0.0"
    port: int = 8080
    static_dir: str = str(Path(__file__).parent / "static")


settings = Settings()
