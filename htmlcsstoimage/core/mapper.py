"""
Wire Mapper
===========

Translate public request variants into the wire models sent to the service.

Inside a batch, an empty ``html``/``url`` on a variation means "inherit from the
batch defaults" and is left out of the wire request. Outside a batch the value
is sent as given, and the service rejects an empty one.
"""

from typing import Any, Optional

from htmlcsstoimage.config.logging import get_logger
from htmlcsstoimage.exceptions import UnsupportedRequestTypeError
from htmlcsstoimage.core.normalizers import normalize_font_list, normalize_measurement
from htmlcsstoimage.models.requests import (
    HtmlCssImageRequest,
    PdfOptions,
    RenderOptions,
    TemplatedImageRequest,
    UrlImageRequest,
)
from htmlcsstoimage.models.wire import (
    WireHtmlCssImageRequest,
    WirePdfOptions,
    WireRequest,
    WireTemplatedImageRequest,
    WireUrlImageRequest,
)

logger = get_logger(__name__)


def map_pdf_options(pdf_options: Optional[PdfOptions]) -> Optional[WirePdfOptions]:
    """Flatten PDF options; margins become ``[top, right, bottom, left]``."""
    if pdf_options is None:
        return None

    margins = None
    if pdf_options.margins is not None:
        margins = [
            normalize_measurement(pdf_options.margins.top),
            normalize_measurement(pdf_options.margins.right),
            normalize_measurement(pdf_options.margins.bottom),
            normalize_measurement(pdf_options.margins.left),
        ]

    page_height = None
    if pdf_options.page_height is not None:
        page_height = normalize_measurement(pdf_options.page_height)

    page_width = None
    if pdf_options.page_width is not None:
        page_width = normalize_measurement(pdf_options.page_width)

    return WirePdfOptions(
        print_background=pdf_options.print_background,
        scale=pdf_options.scale,
        margins=margins,
        page_height=page_height,
        page_width=page_width,
    )


def _render_fields(options: RenderOptions) -> dict:
    return {
        "selector": options.selector,
        "device_scale": options.device_scale,
        "viewport_height": options.viewport_height,
        "viewport_width": options.viewport_width,
        "max_wait_ms": options.max_wait_ms,
        "ms_delay": options.ms_delay,
        "render_when_ready": options.render_when_ready,
        "max_render_once": options.max_render_once,
        "disable_twemoji": options.disable_twemoji,
        "color_scheme": options.color_scheme,
        "timezone": options.timezone,
        "block_consent_banners": options.block_consent_banners,
        "pdf_options": map_pdf_options(options.pdf_options),
    }


def _primary_field(value: str, in_batch: bool) -> Optional[str]:
    if in_batch and value == "":
        return None
    return value


def map_html_css_request(
    request: HtmlCssImageRequest, in_batch: bool = False
) -> WireHtmlCssImageRequest:
    """Map an HTML/CSS request to its wire form."""
    return WireHtmlCssImageRequest(
        html=_primary_field(request.html, in_batch),
        css=request.css,
        google_fonts=normalize_font_list(request.google_fonts),
        **_render_fields(request.options),
    )


def map_url_request(request: UrlImageRequest, in_batch: bool = False) -> WireUrlImageRequest:
    """Map a URL screenshot request to its wire form."""
    return WireUrlImageRequest(
        url=_primary_field(request.url, in_batch),
        full_screen=request.full_screen,
        **_render_fields(request.options),
    )


def map_templated_request(request: TemplatedImageRequest) -> WireTemplatedImageRequest:
    """Templated requests carry no options that need flattening."""
    return WireTemplatedImageRequest(
        template_id=request.template_id,
        template_version=request.template_version,
        template_values=request.template_values,
    )


def map_to_wire(request: Any, in_batch: bool = False) -> WireRequest:
    """
    Map any request variant to its wire model.

    Args:
        request: HTML/CSS, URL or templated request
        in_batch: Whether the request is a batch variation or the batch defaults

    Returns:
        Wire model ready to be serialized

    Raises:
        UnsupportedRequestTypeError: If ``request`` is not a known variant
    """
    if isinstance(request, HtmlCssImageRequest):
        return map_html_css_request(request, in_batch)
    elif isinstance(request, UrlImageRequest):
        return map_url_request(request, in_batch)
    elif isinstance(request, TemplatedImageRequest):
        return map_templated_request(request)

    logger.error("Unsupported request type", request_type=type(request).__name__)
    raise UnsupportedRequestTypeError(f"Unsupported request type: {type(request).__name__}")
