from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Marketplace deployment
    deployer_address: str = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"
    fee_account: str | None = None  # defaults to the deployer
    fee_percent: int = 1

    # Default collection deployed alongside the marketplace
    collection_name: str = "Ultras"
    collection_symbol: str = "ULTRA"

    # Faucet amount when /fund is called without an explicit amount (10,000 ether)
    initial_account_balance_wei: int = 10_000 * 10**18

    # Event bus; events are only kept in memory when unset
    rabbitmq_url: str | None = None

    log_level: str = "INFO"


settings = Settings()
