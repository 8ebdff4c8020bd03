import logging
from functools import lru_cache
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .blocklist import BlocklistMode
from .config import BaseConfiguration, HashidConfiguration, SqidsConfiguration

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Environment driven options for the process-wide ReversibleId.
    Every field maps to a ``REVERSIBLE_ID_<FIELD>`` variable (or a line in ``.env``).
    Unset optional fields fall back to the configuration defaults.
    """
    model_config = SettingsConfigDict(env_prefix="REVERSIBLE_ID_", env_file=".env", extra="ignore")

    encoder: Literal["hashids", "sqids"] = "hashids"
    salt: Optional[str] = None
    min_length: int = 8
    alphabet: Optional[str] = None
    split_at: Optional[int] = 4
    split_with: Optional[str] = "-"
    max_length: Optional[int] = 128
    max_inputs_per_id: int = 32
    blocklist: List[str] = []
    blocklist_mode: BlocklistMode = "length_threshold"
    blocklist_max_length: int = 32
    downcase_on_decode: Optional[bool] = None
    log_level: str = "INFO"

    def to_configuration(self) -> BaseConfiguration:
        options = {
            "min_length": self.min_length,
            "split_at": self.split_at,
            "split_with": self.split_with,
            "max_length": self.max_length,
            "max_inputs_per_id": self.max_inputs_per_id,
            "blocklist": self.blocklist,
            "blocklist_mode": self.blocklist_mode,
            "blocklist_max_length": self.blocklist_max_length,
        }
        if self.alphabet:
            options["alphabet"] = self.alphabet
        if self.downcase_on_decode is not None:
            options["downcase_on_decode"] = self.downcase_on_decode

        logger.debug("Building %s configuration from environment settings", self.encoder)
        if self.encoder == "sqids":
            return SqidsConfiguration(**options)
        return HashidConfiguration(salt=self.salt, **options)


@lru_cache()
def get_settings() -> Settings:
    """Returns the cached settings, read from the environment once per process."""
    return Settings()
