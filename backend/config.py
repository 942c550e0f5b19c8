from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    a4_frequency_hz: float = 440.0
    default_octave: int = 4
    default_key_root: int = 0
    tonnetz_node_distance: float = 60.0
    cors_origins: List[str] = ["http://localhost:5173"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
