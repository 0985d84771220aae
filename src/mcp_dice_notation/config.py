from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICE_ROLLER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    server_name: str = "mcp-dice-notation"
    # stdio works for local MCP clients; the HTTP transports for hosted use.
    transport: Literal["stdio", "sse", "streamable-http"] = "stdio"
    log_level: str = "INFO"
    # Fixed seed makes a whole server session reproducible. Leave unset for real rolls.
    rng_seed: int | None = None


settings = Settings()
