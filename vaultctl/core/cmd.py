import argparse
import logging
import sys
from collections.abc import Sequence

from vaultcodec.bootstrap.config.settings import CodecConfig
from vaultcodec.core.errors import EncodingError
from vaultctl.core.dispatcher import CommandDispatcher
from vaultctl.core.ports.render import Renderer

FORMATS = ("text", "base64", "hex")


class VaultCtl:
    """
    Command-line front end over the vaultcodec conversion primitives.
    Subcommands are registered on the dispatcher by the modules in
    `vaultctl.bootstrap.commands`.
    """

    def __init__(self, renderers: dict[str, Renderer]) -> None:
        self._renderers = renderers
        self._argparser = self._argparse()
        self._dispatcher = CommandDispatcher()
        self._logger = logging.getLogger("vaultctl.cmd")

    @property
    def argparser(self) -> argparse.ArgumentParser:
        return self._argparser

    def command(self, *arguments: str):
        return self._dispatcher.command(*arguments)

    def run(self, argv: Sequence[str] | None, config: CodecConfig) -> int:
        namespace = self._argparser.parse_args(argv)
        renderer = self._renderers[namespace.output or config.output]

        try:
            msg = self._dispatcher.dispatch(
                namespace.command,
                config=config,
                namespace=namespace
            )
        except EncodingError as ex:
            self._logger.debug(f"Command '{namespace.command}' failed: {ex}")
            print(f"error: {ex.detail or ex}", file=sys.stderr)
            return 1

        print(renderer.render(msg.to_dict()))
        return 0

    def _argparse(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="vaultctl",
            description="Convert and inspect values with the vaultcodec primitives.",
            formatter_class=argparse.RawTextHelpFormatter
        )

        parser.add_argument(
            "-o", "--output",
            choices=sorted(self._renderers),
            default=None,
            help="Output format (defaults to the configured one)."
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        convert = subparsers.add_parser(
            "convert",
            help="Convert a value between text, base64 and hex."
        )
        convert.add_argument("--from", dest="source", choices=FORMATS, required=True)
        convert.add_argument("--to", dest="target", choices=FORMATS, required=True)
        convert.add_argument(
            "--standard",
            action="store_true",
            help="Emit standard padded base64 instead of the URL-safe alphabet."
        )
        convert.add_argument("value", type=str)

        inspect = subparsers.add_parser(
            "inspect",
            help="Report whether a value is base64 and its decoded size."
        )
        inspect.add_argument("value", type=str)

        canonical = subparsers.add_parser(
            "canonical",
            help=(
                "Re-encode JSON text in canonical form.\n"
                "With --serializer msgpack the packed bytes are printed as base64."
            )
        )
        canonical.add_argument(
            "--serializer",
            choices=["json", "msgpack"],
            default="json"
        )
        canonical.add_argument("json", type=str)

        return parser
