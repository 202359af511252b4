from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./data.db"
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: str = "*"
    admin_token: str | None = None

    openrouter_api_url: str = "https://openrouter.ai/api/v1/chat/completions"
    completion_http_referer: str = "https://mosaaedak.com"
    completion_app_title: str = "مساعدك الذكي"
    completion_timeout_seconds: float = 60.0

    twilio_api_base: str = "https://api.twilio.com/2010-04-01"
    carrier_timeout_seconds: float = 30.0
    default_support_agent_phone: str = "whatsapp:+966500000000"

    max_history_messages: int = 20
    session_retention_hours: int = 1
    session_sweep_interval_seconds: float = 600.0
    session_sweep_enabled: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
