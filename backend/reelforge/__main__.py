"""ReelForge CLI entry point."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv(Path.cwd() / ".env")

from reelforge import __version__
from reelforge.config import get_settings
from reelforge.consumer import Dashboard, Phase, StudioClient, Submission, render_dashboard
from reelforge.consumer.render import render_progress, render_status
from reelforge.exceptions import BriefValidationError
from reelforge.models import Brief, encode_event
from reelforge.producer import build_event_sequence

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE = """# ReelForge Configuration
# Secrets (LOGFIRE_TOKEN) belong in .env, not here.

producer:
  event_delay_seconds: 0.45
  min_duration: 15
  max_duration: 120
  fallback_duration: 45

server:
  host: 0.0.0.0
  port: 8000
  generate_path: /api/generate
  allowed_origins:
    - http://localhost:3000

studio:
  base_url: http://localhost:8000
  generate_path: /api/generate
  timeout_seconds: 30
"""


def _init_logfire(app: Any = None) -> None:
    """Initialize Logfire if available, without failing commands."""
    try:
        from reelforge.observability import initialize_logfire

        initialize_logfire(get_settings(), app=app)
    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")


def _brief_payload(args: argparse.Namespace) -> dict[str, Any]:
    """Collect brief fields given on the command line, wire-named."""
    fields = {
        "topic": args.topic,
        "platform": args.platform,
        "tone": args.tone,
        "length": args.length,
        "voice": args.voice,
        "callToAction": args.cta,
        "audience": args.audience,
        "brandColor": args.brand_color,
        "autopilot": False if args.no_autopilot else None,
    }
    return {key: value for key, value in fields.items() if value is not None}


def cmd_init(args: argparse.Namespace) -> int:
    """Create the data directory and a config template."""
    data_dir = Path("data").resolve()

    try:
        data_dir.mkdir(exist_ok=True)
        config_path = data_dir / "config.yaml"
        if config_path.exists():
            logger.info(f"Config file already exists: {config_path}")
        else:
            config_path.write_text(CONFIG_TEMPLATE)
            logger.info(f"Created config template: {config_path}")

        print(f"\n✓ Data directory initialized at {data_dir}\n")
        return 0

    except OSError as e:
        logger.error(f"Failed to initialize: {e}")
        print(f"\n❌ Initialization failed: {e}\n")
        return 1


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1

    print("\n=== ReelForge Configuration ===\n")
    print(f"Data Directory: {settings.data_dir}\n")

    print("Producer:")
    print(f"  Event Delay: {settings.producer.event_delay_seconds}s")
    print(
        f"  Duration Range: {settings.producer.min_duration}-"
        f"{settings.producer.max_duration}s "
        f"(fallback {settings.producer.fallback_duration}s)\n"
    )

    print("Server:")
    print(f"  Listen: {settings.server.host}:{settings.server.port}")
    print(f"  Generate Path: {settings.server.generate_path}")
    print(f"  Allowed Origins: {', '.join(settings.server.allowed_origins)}\n")

    print("Studio Client:")
    print(f"  Base URL: {settings.studio.base_url}")
    print(f"  Timeout: {settings.studio.timeout_seconds}s\n")

    print(f"Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP server."""
    import uvicorn

    from reelforge.api import create_app

    settings = get_settings()
    if args.no_delay:
        settings.producer.event_delay_seconds = 0.0

    app = create_app(settings)
    _init_logfire(app)

    uvicorn.run(
        app,
        host=args.host or settings.server.host,
        port=args.port or settings.server.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    """Print the event sequence for a brief without starting a server."""
    try:
        brief = Brief.from_payload(_brief_payload(args))
    except BriefValidationError as e:
        print(f"\n❌ {e}: {e.details}\n")
        return 1

    for event in build_event_sequence(brief, get_settings().producer):
        sys.stdout.write(encode_event(event).decode("utf-8"))
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Submit a brief to a running server and render the live dashboard."""
    settings = get_settings()
    printed = {"status": 0}

    def on_update(submission: Submission) -> None:
        feed = submission.state.status_feed
        for item in feed[printed["status"]:]:
            print(render_status(item))
        printed["status"] = len(feed)
        if submission.phase is Phase.STREAMING:
            print(render_progress(submission.state))

    async def run() -> Submission:
        async with StudioClient(settings.studio, base_url=args.base_url) as client:
            dashboard = Dashboard(client, on_update=on_update)
            return await dashboard.submit(_brief_payload(args))

    _init_logfire()
    try:
        submission = asyncio.run(run())
    except KeyboardInterrupt:
        print("\n\nInterrupted.\n")
        return 1

    print()
    print(render_dashboard(submission.state, submission.phase))
    return 0 if submission.phase is Phase.COMPLETED else 1


def _add_brief_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--topic", required=True, help="What reel should the agents build?")
    parser.add_argument("--platform", help="Target platform (default: instagram)")
    parser.add_argument("--tone", help="Tone (default: cinematic)")
    parser.add_argument("--length", help="Target length in seconds (default: 30)")
    parser.add_argument("--voice", help="Voice profile (default: warm)")
    parser.add_argument("--cta", help="Call to action")
    parser.add_argument("--audience", help="Audience (default: general)")
    parser.add_argument("--brand-color", help="Brand color, e.g. #7f5af0")
    parser.add_argument("--no-autopilot", action="store_true", help="Disable autopilot")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="ReelForge: simulated live reel production pipeline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ReelForge {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_init = subparsers.add_parser("init", help="Create data/config.yaml")
    parser_init.set_defaults(func=cmd_init)

    parser_config = subparsers.add_parser("config", help="Display merged configuration")
    parser_config.set_defaults(func=cmd_config)

    parser_serve = subparsers.add_parser("serve", help="Run the NDJSON streaming server")
    parser_serve.add_argument("--host", help="Bind host")
    parser_serve.add_argument("--port", type=int, help="Bind port")
    parser_serve.add_argument(
        "--no-delay",
        action="store_true",
        help="Emit events without the inter-event delay",
    )
    parser_serve.set_defaults(func=cmd_serve)

    parser_preview = subparsers.add_parser(
        "preview",
        help="Print the event stream for a brief as NDJSON",
    )
    _add_brief_arguments(parser_preview)
    parser_preview.set_defaults(func=cmd_preview)

    parser_generate = subparsers.add_parser(
        "generate",
        help="Submit a brief to a running server and watch the pipeline",
    )
    _add_brief_arguments(parser_generate)
    parser_generate.add_argument("--base-url", help="Server base URL")
    parser_generate.set_defaults(func=cmd_generate)

    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
