from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    frontend_url: str = "http://localhost:3000"
    app_env: str = "development"
    log_level: str = "INFO"

    # Scoring
    stemmer: str = "porter"
    relevance_scoring_enabled: bool = True
    max_title_tokens: int = 64

    # Blocking (score on the 0-100 relevance scale)
    fuzzy_block_threshold: float = 70.0

    # Request limits
    max_candidates: int = 500
    max_blocked_names: int = 500

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
