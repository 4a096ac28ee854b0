import os
from os.path import join
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from functools import lru_cache

root_dir = os.path.dirname(os.path.abspath(__file__))
env_path = join(root_dir, ".env.local")
if os.path.exists(env_path):
    load_dotenv(env_path)


class Settings(BaseSettings):
    log_file_path: str = "roleguard.log"
    log_level: str = "INFO"
    enable_console_logging: bool = False
    env: str | None = None

    model_config = SettingsConfigDict(env_file=join(root_dir, ".env"))


@lru_cache
def get_settings():
    return Settings()


settings = get_settings()
