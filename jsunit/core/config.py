"""
Harness settings: script roots, encoding and engine limits.

Values come from the environment (prefix ``JSUNIT_``) or a local ``.env`` file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JSUNIT_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Target scripts (the code under test) and test scripts live under separate roots.
    TARGET_ROOT: str = "src/main/webapp/js"
    TEST_ROOT: str = "src/test/js"
    # Relative resource/mock paths are joined to this root when set; otherwise passed through.
    RESOURCE_ROOT: str | None = None

    # None means the host's default text encoding.
    SCRIPT_ENCODING: str | None = None

    SCRIPT_EXEC_TIMEOUT: float | None = Field(default=None, gt=0)
    SCRIPT_MEMORY_LIMIT: int | None = Field(default=None, gt=0)


settings = Settings()
