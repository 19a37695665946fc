from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    database_url: str = "sqlite+aiosqlite:///./app.db"
    log_level: str = "INFO"
    sql_echo: bool = False
