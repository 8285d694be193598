#!/usr/bin/env python3
"""
Wallet Balance Service Entry Point

Starts the FastAPI server with the wallet balance API.
"""

import sys

import uvicorn

from wallet_balance.config import get_config
from wallet_balance.logging_config import setup_logging


if __name__ == "__main__":
    config = get_config()
    logger = setup_logging(
        level=config.log_level,
        log_format=config.log_format,
        log_file=config.log_file
    )

    print("Starting Wallet Balance Service...")
    print(f"Failure mode: {config.failure_mode}")
    print(f"API available at: http://{config.api_host}:{config.api_port}")
    print(f"Documentation at: http://{config.api_host}:{config.api_port}/docs")
    print()

    try:
        uvicorn.run(
            "wallet_balance.api:app",
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower()
        )
    except KeyboardInterrupt:
        print("\nShutting down Wallet Balance Service...")
    except Exception as e:
        logger.exception("Server stopped with an error")
        print(f"Error starting server: {e}")
        sys.exit(1)
