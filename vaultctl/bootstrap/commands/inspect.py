import argparse

from vaultcodec.bootstrap.config.settings import CodecConfig
from vaultcodec.core.encoding.b64 import base64_byte_length, is_base64
from vaultcodec.core.encoding.binary import base64_to_hex
from vaultctl.bootstrap.deps import get_cli
from vaultctl.core.model import Message

cli = get_cli()


@cli.command("inspect")
def cmd_inspect(config: CodecConfig, namespace: argparse.Namespace) -> Message:
    _ = config
    value = namespace.value

    if not is_base64(value):
        return Message(type="ok", data={"is_base64": False})

    return Message(
        type="ok",
        data={
            "is_base64": True,
            "byte_length": base64_byte_length(value),
            "hex": base64_to_hex(value)
        }
    )
