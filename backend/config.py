import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash-latest"
    gemini_temperature: float = 0.2
    gemini_max_output_tokens: int = 2048

    # Hard cap on resume characters embedded in the prompt
    resume_char_limit: int = 4500

    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        """Accept CORS_ORIGINS as comma-separated string or JSON list."""
        if not isinstance(value, str):
            return value
        if value.startswith("["):
            return json.loads(value)
        return [o.strip() for o in value.split(",") if o.strip()]


settings = Settings()
