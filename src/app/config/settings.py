from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI settings
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_COMPLETION_ENDPOINT: str = "/chat/completions"
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_TEMPERATURE: float = 0.7

    # Server settings
    CORS_ALLOWED_ORIGINS: list = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_RAW_MODEL_CONTENT: bool = False

    class Config:
        env_file = ".env"


settings = Settings()


def get_settings() -> Settings:
    return settings
