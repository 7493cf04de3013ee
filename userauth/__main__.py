# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Run the API server: ``python -m userauth --config-path config/server.toml``."""

from __future__ import annotations

import argparse
from pathlib import Path

from userauth.app import create_app
from userauth.shared.config import AppConfig, load_config
from userauth.shared.logging import logger

DEFAULT_CONFIG_PATH = Path("config/server.toml")


def resolve_config(config_path: Path) -> AppConfig:
    if config_path.is_file():
        return load_config(str(config_path))
    if config_path != DEFAULT_CONFIG_PATH:
        raise FileNotFoundError(f"config file not found: {config_path}")
    return load_config()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="User registration and session API")
    parser.add_argument(
        "--config-path",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to a TOML config file (defaults and environment are used if absent)",
    )
    args = parser.parse_args(argv)

    config = resolve_config(args.config_path)
    app = create_app(config)

    host, port = config.bind_host_port()
    logger.info(f"starting server on {host}:{port}")
    app.run(host=host, port=port, debug=False, threaded=True)


if __name__ == "__main__":
    main()
