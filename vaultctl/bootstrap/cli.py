import sys

from vaultcodec.bootstrap.deps import get_config
from vaultcodec.core.helpers.utils import scan, setup_logging
from vaultctl.bootstrap.deps import get_cli


@scan("vaultctl.bootstrap.commands")
def main() -> None:
    config = get_config()
    setup_logging(config.log_level)

    cli = get_cli()
    sys.exit(cli.run(sys.argv[1:], config))


if __name__ == "__main__":
    main()
