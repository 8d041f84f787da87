from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ROBO_")

    # Target site for the demo (SauceDemo: public demo store)
    base_url: str = Field(default="https://www.saucedemo.com/")

    # Demo credentials (publicly provided by SauceDemo)
    username: str = Field(default="standard_user")
    password: str = Field(default="secret_sauce")

    # Timeouts (ms)
    nav_timeout_ms: int = 20000
    action_timeout_ms: int = 10000

    # Pause between retry attempts; 0 re-attempts immediately
    poll_interval_ms: int = Field(default=0, ge=0)

    # Playwright
    headless: bool = True


settings = Settings()
