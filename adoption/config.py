from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DbConfig(BaseModel):
    url: str


class LogConfig(BaseModel):
    level: str = Field(default="INFO")


class Settings(BaseSettings):
    db: DbConfig
    log: LogConfig = Field(default_factory=LogConfig)

    model_config = SettingsConfigDict(env_nested_delimiter='__')


app_config = Settings()  # type: ignore
