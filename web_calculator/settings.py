from pydantic import BaseModel
from pydantic_settings import BaseSettings

from web_calculator.arithmetic import INT64_MAX, INT64_MIN


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    timeout_keep_alive: int = 5  # Seconds an idle keep-alive connection is held


class CalculatorSettings(BaseModel):
    operand_min: int = INT64_MIN
    operand_max: int = INT64_MAX
    root_route: str = "/"
    add_route: str = "/add"
    health_route: str = "/api/health"


class Settings(BaseSettings):
    server: ServerSettings = ServerSettings()
    calculator: CalculatorSettings = CalculatorSettings()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_nested_delimiter = "."
        extra = "ignore"  # Ignore additional env variables in .env


SETTINGS = Settings()
