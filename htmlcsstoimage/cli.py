"""
Command Line Interface
======================

Create images and signed URLs from the shell. Credentials are read from the
``HCTI_API_ID`` and ``HCTI_API_KEY`` environment variables.

Exit codes: 0 on success, 1 when the service rejects the request,
2 on configuration errors.
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from htmlcsstoimage.client import HtmlCssToImageClient
from htmlcsstoimage.config.logging import get_logger, setup_logging
from htmlcsstoimage.config.settings import get_settings
from htmlcsstoimage.core.transport import Transport
from htmlcsstoimage.exceptions import ClientConfigurationError
from htmlcsstoimage.models.requests import (
    ColorScheme,
    HtmlCssImageRequest,
    RenderOptions,
    UrlImageRequest,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_CONFIG_ERROR = 2


def _add_render_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--viewport-width", type=int, help="Viewport width in pixels")
    parser.add_argument("--viewport-height", type=int, help="Viewport height in pixels")
    parser.add_argument("--device-scale", type=float, help="Device pixel ratio")
    parser.add_argument("--selector", help="CSS selector to crop the image to")
    parser.add_argument("--ms-delay", type=int, help="Delay before the screenshot, in ms")
    parser.add_argument(
        "--color-scheme", choices=[scheme.value for scheme in ColorScheme], help="Color scheme"
    )
    parser.add_argument("--timezone", help="IANA timezone, e.g. Europe/Paris")
    parser.add_argument(
        "--block-consent-banners", action="store_true", help="Block cookie/consent banners"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hcti", description="Render images with the HTML/CSS to Image API"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    html_parser = subparsers.add_parser("html", help="Create an image from HTML/CSS")
    html_parser.add_argument("--html", required=True, help="HTML content")
    html_parser.add_argument("--css", help="CSS content")
    html_parser.add_argument(
        "--font", action="append", dest="fonts", default=[], help="Google Font (repeatable)"
    )
    _add_render_arguments(html_parser)

    url_parser = subparsers.add_parser("url", help="Screenshot a web page")
    url_parser.add_argument("--url", required=True, help="Page to screenshot")
    url_parser.add_argument("--full-screen", action="store_true", help="Capture the full page")
    _add_render_arguments(url_parser)

    template_parser = subparsers.add_parser(
        "template-url", help="Print a signed URL rendering a template"
    )
    template_parser.add_argument("template_id", help="Template identifier")
    template_parser.add_argument(
        "--value",
        action="append",
        dest="values",
        default=[],
        metavar="KEY=VALUE",
        help="Template value (repeatable); VALUE may be JSON",
    )
    template_parser.add_argument("--version", type=int, help="Template version")

    render_parser = subparsers.add_parser(
        "render-url", help="Print a signed create-and-render URL for a web page"
    )
    render_parser.add_argument("--url", required=True, help="Page to screenshot")
    render_parser.add_argument("--full-screen", action="store_true", help="Capture the full page")
    _add_render_arguments(render_parser)

    return parser


def parse_template_values(pairs: List[str]) -> Dict[str, Any]:
    """Parse ``KEY=VALUE`` pairs; values that are valid JSON are decoded."""
    values: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Template values must look like KEY=VALUE, got {pair!r}")
        try:
            values[key] = json.loads(raw)
        except ValueError:
            values[key] = raw
    return values


def _render_options(args: argparse.Namespace) -> RenderOptions:
    return RenderOptions(
        viewport_width=args.viewport_width,
        viewport_height=args.viewport_height,
        device_scale=args.device_scale,
        selector=args.selector,
        ms_delay=args.ms_delay,
        color_scheme=args.color_scheme,
        timezone=args.timezone,
        block_consent_banners=args.block_consent_banners or None,
    )


def _url_request(args: argparse.Namespace) -> UrlImageRequest:
    return UrlImageRequest(
        url=args.url,
        full_screen=args.full_screen or None,
        options=_render_options(args),
    )


async def run(args: argparse.Namespace, client: HtmlCssToImageClient) -> int:
    """Execute a parsed command and print its result."""
    if args.command == "template-url":
        print(client.create_templated_image_url(
            args.template_id, parse_template_values(args.values), args.version
        ))
        return EXIT_OK

    if args.command == "render-url":
        print(client.create_and_render_url(_url_request(args)))
        return EXIT_OK

    if args.command == "html":
        request = HtmlCssImageRequest(
            html=args.html,
            css=args.css,
            google_fonts=args.fonts or None,
            options=_render_options(args),
        )
    else:
        request = _url_request(args)

    result = await client.create_image(request)
    print(result.model_dump_json(exclude_none=True, indent=2))
    return EXIT_OK if result.success else EXIT_REJECTED


def main(argv: Optional[List[str]] = None, transport: Optional[Transport] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        setup_logging(settings)
        client = HtmlCssToImageClient.from_settings(settings, transport)
        return asyncio.run(run(args, client))
    except ClientConfigurationError as e:
        logger.error("Configuration error", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except ValueError as e:
        # includes pydantic validation errors for malformed options
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
