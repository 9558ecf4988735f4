"""Global configuration (12-factor style).

Environment variables (all optional, also read from ``.env``):

* ``TOKEN_LIMIT``       - default: ``1000`` tokens per chunk
* ``MODEL_NAME``        - default: ``"gpt-4"``; selects the tiktoken encoding
* ``ENCODING_NAME``     - optional; explicit tiktoken encoding, overrides the model
* ``SHRINK_RATIO``      - default: ``0.1``; fraction cut per shrink step
* ``FULLNESS_FLOOR``    - default: ``0.8``; minimum fill before snapping to a newline
* ``STRIP_FRONTMATTER`` - default: ``true``; drop YAML front matter before chunking
* ``LOG_LEVEL``         - default: ``"INFO"``

Usage:

    from mdchunk.core.config import Settings
    settings = Settings()  # auto-loads & validates env vars
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from mdchunk.core.boundary import FULLNESS_FLOOR
from mdchunk.core.boundary import SHRINK_RATIO


class Settings(BaseSettings):
    """Typed view over process environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        protected_namespaces=(),
    )

    token_limit: int = Field(default=1000, ge=1)
    model_name: str = "gpt-4"
    encoding_name: str | None = None

    shrink_ratio: float = Field(default=SHRINK_RATIO, gt=0, lt=1)
    fullness_floor: float = Field(default=FULLNESS_FLOOR, gt=0, le=1)

    strip_frontmatter: bool = True
    log_level: str = "INFO"
