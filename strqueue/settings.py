from anystore.settings import BaseSettings
from pydantic_settings import SettingsConfigDict

# unsigned long on LP64 platforms
ULONG_MAX = 2**64 - 1


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="strqueue_",
        env_file=".env",
        extra="ignore",
    )

    debug: bool = False
    log_level: str = "INFO"

    max_handle: int = ULONG_MAX
    synchronized: bool = False
