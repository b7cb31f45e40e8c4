from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Cold Indicators: distinct competency categories needed for a full score
    indicator_saturation: int = Field(default=4, ge=1)

    # Score Arbiter: threads used to evaluate bullet pairs (1 = sequential)
    arbiter_max_workers: int = Field(default=1, ge=1)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
