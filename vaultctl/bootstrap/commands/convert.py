import argparse

from vaultcodec.bootstrap.config.settings import CodecConfig
from vaultcodec.core.encoding.b64 import base64_to_bytes, bytes_to_base64
from vaultcodec.core.encoding.binary import (
    bytes_to_hex,
    bytes_to_string,
    hex_to_bytes,
    string_to_bytes,
)
from vaultctl.bootstrap.deps import get_cli
from vaultctl.core.model import Message

cli = get_cli()


def decode_value(source: str, value: str) -> bytes:
    if source == "text":
        return string_to_bytes(value)
    if source == "base64":
        return base64_to_bytes(value)
    return hex_to_bytes(value)


def encode_value(target: str, data: bytes, config: CodecConfig, standard: bool = False) -> str:
    if target == "text":
        return bytes_to_string(data, config.encoding.text_encoding)
    if target == "base64":
        return bytes_to_base64(data, url_safe=config.encoding.url_safe and not standard)
    return bytes_to_hex(data)


@cli.command("convert")
def cmd_convert(config: CodecConfig, namespace: argparse.Namespace) -> Message:
    data = decode_value(namespace.source, namespace.value)
    return Message(
        type="ok",
        data={
            "from": namespace.source,
            "to": namespace.target,
            "value": encode_value(namespace.target, data, config, namespace.standard)
        }
    )
