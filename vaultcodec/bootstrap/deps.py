import json
from functools import lru_cache

from pydantic import ValidationError

from vaultcodec.bootstrap.config.settings import CodecConfig
from vaultcodec.core.ports.serializer import Serializer
from vaultcodec.infra.json_serializer import JsonSerializer
from vaultcodec.infra.msgpack_serializer import MsgPackSerializer


@lru_cache
def get_config() -> CodecConfig:
    try:
        return CodecConfig()
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


@lru_cache
def get_serializer(name: str = "json") -> Serializer:
    if name == "json":
        return JsonSerializer()
    if name == "msgpack":
        return MsgPackSerializer()
    raise ValueError(f"Unknown serializer: {name}")
