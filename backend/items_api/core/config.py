# backend/items_api/core/config.py
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = 'Items API'
    app_version: str = '1.0.0'
    debug: bool = False
    host: str = '0.0.0.0'
    port: int = 4000
    data_file: Path = Path('data.json')
    docs_url: str = '/api-docs'
    log_level: str = 'INFO'

    model_config = SettingsConfigDict(env_prefix='ITEMS_', env_file='.env', env_file_encoding='utf-8')


settings = Settings()
