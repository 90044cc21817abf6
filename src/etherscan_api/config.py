from pydantic_settings import BaseSettings, SettingsConfigDict

from etherscan_api.domain.enums import CHAIN_IDS, Chain

DEFAULT_API_URL = "https://api.etherscan.io/v2/api"


class Settings(BaseSettings):
    """Client configuration, read from `ETHERSCAN_*` environment variables or `.env`."""

    model_config = SettingsConfigDict(env_prefix="ETHERSCAN_", env_file=".env", extra="ignore")

    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    chain: Chain = Chain.ETHEREUM
    chain_id: int | None = None  # overrides `chain` for networks without a Chain member
    rate_per_second: float = 5.0  # free tier allows 5 calls/sec
    timeout: float = 30.0
    max_retries: int = 3
    backoff_seconds: float = 1.0
    cache_dir: str | None = None

    @property
    def resolved_chain_id(self) -> int:
        return self.chain_id if self.chain_id is not None else CHAIN_IDS[self.chain]
