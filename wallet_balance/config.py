"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional


class WalletBalanceConfig(BaseSettings):
    """Wallet balance service configuration"""

    model_config = SettingsConfigDict(
        env_prefix="WALLET_BALANCE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Balance engine
    failure_mode: Literal["fail_fast", "collect_all"] = "fail_fast"

    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8090

    # Logging configuration
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Optional[str] = None  # If None, logs to stderr


# Global configuration instance
config = WalletBalanceConfig()


def get_config() -> WalletBalanceConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> WalletBalanceConfig:
    """Reload configuration from environment"""
    global config
    config = WalletBalanceConfig()
    return config
