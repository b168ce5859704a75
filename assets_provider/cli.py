"""Command line tools for asset configuration files.

Usage:
    assets-provider validate config/assets.yaml
    assets-provider render config/assets.yaml --root-url https://example.com
"""

import argparse
import logging
import sys

from .application import bootstrap
from .config import get_settings, load_configuration
from .errors import AssetsError
from .logging import configure_logging
from .observability.tracing import configure_tracing

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assets-provider", description="Inspect asset configuration"
    )
    parser.add_argument("--root-directory", help="Override ASSETS_ROOT_DIRECTORY")
    parser.add_argument("--root-url", help="Override ASSETS_ROOT_URL")
    parser.add_argument("--log-level", default=None)

    commands = parser.add_subparsers(dest="command", required=True)
    validate = commands.add_parser("validate", help="Validate asset definitions")
    validate.add_argument("config")
    render = commands.add_parser("render", help="Print rendered asset markup")
    render.add_argument("config")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = get_settings()
    overrides = {
        key: value
        for key, value in {
            "root_directory": args.root_directory,
            "root_url": args.root_url,
        }.items()
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(args.log_level or settings.log_level, settings.service_name)
    configure_tracing(settings.service_name, settings.otel_exporter_otlp_endpoint)

    try:
        configuration = load_configuration(args.config)
        application = bootstrap(configuration, settings=settings)
        if args.command == "render":
            page = application.render_assets()
            print("<!-- head -->")
            print(page.head)
            print("<!-- footer -->")
            print(page.footer)
        else:
            registry = application.registry
            print(
                f"{len(registry.scripts)} script(s), "
                f"{len(registry.styles)} style(s) registered"
            )
    except (AssetsError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
