from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Weight overrides by metric name, e.g. WEIGHT_OVERRIDES='{"noise": 0.5}'
    weight_overrides: dict[str, float] = {}

    # Fall back to city reference values when coordinates are given
    use_city_data: bool = True

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}
