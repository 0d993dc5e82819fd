import argparse
import functools
from typing import Protocol

from vaultcodec.bootstrap.config.settings import CodecConfig
from vaultctl.core.model import Message


class CommandHandler(Protocol):
    def __call__(
        self,
        config: CodecConfig,
        namespace: argparse.Namespace,
    ) -> Message:
        ...


class CommandDispatcher:
    def __init__(self) -> None:
        self._commands: dict[tuple[str, ...], CommandHandler] = {}

    def dispatch(
        self,
        *arguments: str,
        config: CodecConfig,
        namespace: argparse.Namespace
    ) -> Message:
        command = self._commands.get(arguments)
        if command is None:
            raise RuntimeError(f"Unknown '{' '.join(arguments)}' Command")
        return command(config, namespace)

    def command(self, *arguments: str):
        def decorator(func: CommandHandler):
            if arguments in self._commands:
                raise RuntimeError(f"Command already registered for '{' '.join(arguments)}'")

            @functools.wraps(func)
            def wrapper(
                config: CodecConfig,
                namespace: argparse.Namespace,
            ) -> Message:
                return func(config, namespace)

            self._commands[arguments] = wrapper

            return wrapper

        return decorator
