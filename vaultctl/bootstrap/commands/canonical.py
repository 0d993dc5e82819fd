import argparse

from vaultcodec.bootstrap.config.settings import CodecConfig
from vaultcodec.bootstrap.deps import get_serializer
from vaultcodec.core.encoding.b64 import bytes_to_base64
from vaultcodec.core.encoding.binary import bytes_to_string
from vaultcodec.core.marshal import unmarshal
from vaultctl.bootstrap.deps import get_cli
from vaultctl.core.model import Message

cli = get_cli()


@cli.command("canonical")
def cmd_canonical(config: CodecConfig, namespace: argparse.Namespace) -> Message:
    value = unmarshal(namespace.json)
    packed = get_serializer(namespace.serializer).serialize(value)

    if namespace.serializer == "json":
        encoded = bytes_to_string(packed)
    else:
        encoded = bytes_to_base64(packed, url_safe=config.encoding.url_safe)

    return Message(
        type="ok",
        data={"serializer": namespace.serializer, "value": encoded}
    )
