import os
from functools import lru_cache
from pathlib import Path

CONFIG_ENV = "VAULTCODEC_CONFIG"
DEFAULT_CONFIG_NAME = "vaultcodec.yaml"


@lru_cache
def get_configfile() -> Path | None:
    # Priority: ENV > default file in current working directory
    raw = os.getenv(CONFIG_ENV)

    if raw is None:
        file = Path.cwd() / DEFAULT_CONFIG_NAME
        return file if file.is_file() else None

    file = Path(raw)
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            f"  - Fix or unset the {CONFIG_ENV} environment variable\n"
            f"  - Or place a '{DEFAULT_CONFIG_NAME}' file in the current working directory."
        )

    return file
