from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    # Helius balances index (required — requests fail with 500 while empty)
    helius_api_key: str = ""
    helius_api_url: str = "https://api.helius.xyz/v0"

    # Solana RPC (NEXT_PUBLIC_RPC_URL kept for older deployments)
    solana_rpc_url: str = Field(
        "https://api.mainnet-beta.solana.com",
        validation_alias=AliasChoices("SOLANA_RPC_URL", "NEXT_PUBLIC_RPC_URL"),
    )
    rpc_commitment: str = "confirmed"

    # Outbound HTTP timeout in seconds (None = wait for the upstream)
    http_timeout_sec: float | None = None

    # Eligibility
    evaluate_criteria_concurrently: bool = False
    demo_transfer_lamports: int = 1  # self-transfer attached to the signable tx

    # Action metadata (GET descriptor)
    action_icon_url: str = "https://i.pinimg.com/originals/eb/23/cb/eb23cbe770fb90cc03171a56de61e17b.gif"
    action_title: str = "DeFi Airdrop Checker"
    action_description: str = (
        "Check your eligibility for various DeFi protocol airdrops based on your on-chain activity"
    )
    action_label: str = "Check Airdrops"

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 3000
    log_level: str = "INFO"
    json_logs: bool = False
    log_dir: str = ""  # empty = console only


settings = Settings()
