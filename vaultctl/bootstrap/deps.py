from functools import lru_cache

from vaultctl.core.cmd import VaultCtl
from vaultctl.infra.format_renderer import JsonRenderer, YamlRenderer


@lru_cache
def get_cli() -> VaultCtl:
    renderers = {
        "json": JsonRenderer(),
        "yaml": YamlRenderer(),
    }
    return VaultCtl(renderers)
