from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Environment
    environment: str = "production"

    # Redis (empty = in-memory travel input store)
    redis_url: str = ""
    travel_input_ttl_seconds: int = 30 * 24 * 60 * 60  # 30 days

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def expose_error_details(self) -> bool:
        return self.environment == "development"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
