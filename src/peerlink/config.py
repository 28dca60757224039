from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "PEERLINK_", "env_file": ".env", "extra": "ignore"}

    # Peer used by the entry point (registry kind)
    peer: str = "console"
    peer_name: str = "MyClient"

    # Demo payload
    greeting: str = "hello"

    # Text helpers
    encoding: str = "utf-8"
    chunk_size: int = Field(default=4000, gt=0)

    # Logging
    log_level: str = "INFO"


settings = Settings()
