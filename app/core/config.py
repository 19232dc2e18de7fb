from pydantic_settings import BaseSettings

from app.schemas.token import TokenInfo
from app.utils.enums import HookPolicy


class Settings(BaseSettings):
    PROJECT_NAME: str = "OrcaSignal Risk Registry"
    API_V1_PREFIX: str = "/api/v1"

    DATABASE_URL: str = "sqlite:///./orca_signal.db"

    # Identity that owns the registry when it is first created
    REGISTRY_OWNER: str = "0x00000000000000000000000000000000000000aa"

    SESSION_TIMEOUT_SECONDS: int = 3600
    MAX_ACTIONS_PER_SESSION: int = 100

    HOOK_POLICY: HookPolicy = HookPolicy.BLOCK_HIGH
    HIGH_RISK_THRESHOLD: int = 70
    MEDIUM_RISK_THRESHOLD: int = 40

    # Tokens the dashboard offers for analysis
    TOKEN_NETWORK: str = "sepolia"
    SUPPORTED_TOKENS: list[TokenInfo] = [
        TokenInfo(
            address="0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238",
            symbol="USDC",
            name="USD Coin (Sepolia)",
            decimals=6,
        ),
        TokenInfo(
            address="0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14",
            symbol="WETH",
            name="Wrapped Ether (Sepolia)",
            decimals=18,
        ),
        TokenInfo(
            address="0x68194a729C2450ad26072b3D33ADaCbcef39D574",
            symbol="DAI",
            name="Dai Stablecoin (Sepolia)",
            decimals=18,
        ),
    ]

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"


settings = Settings()
