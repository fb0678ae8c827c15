"""
HTML/CSS to Image Client
========================

Python client for the hcti.io image rendering API.

This package provides:
- Typed request models for HTML/CSS, URL screenshot and templated images
- Async single and batch image creation over a pluggable HTTP transport
- Offline generation of signed template and create-and-render URLs
- A command-line front end (``python -m htmlcsstoimage``)
"""

from htmlcsstoimage.client import BaseImageClient, HtmlCssToImageClient
from htmlcsstoimage.core.transport import AiohttpTransport, HttpResponse
from htmlcsstoimage.exceptions import (
    ClientConfigurationError,
    HtmlCssToImageError,
    UnsupportedRequestTypeError,
)
from htmlcsstoimage.models.requests import (
    ColorScheme,
    HtmlCssImageRequest,
    PdfMargins,
    PdfOptions,
    PdfUnit,
    PdfValueWithUnits,
    RenderOptions,
    TemplatedImageRequest,
    UrlImageRequest,
)
from htmlcsstoimage.models.responses import (
    CreateImageBatchResponse,
    CreateImageBatchSuccessResponse,
    CreateImageErrorResponse,
    CreateImageResponse,
    CreateImageSuccessResponse,
    UnrecognizedSuccessResponse,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    "AiohttpTransport",
    "BaseImageClient",
    "ClientConfigurationError",
    "ColorScheme",
    "CreateImageBatchResponse",
    "CreateImageBatchSuccessResponse",
    "CreateImageErrorResponse",
    "CreateImageResponse",
    "CreateImageSuccessResponse",
    "HtmlCssImageRequest",
    "HtmlCssToImageClient",
    "HtmlCssToImageError",
    "HttpResponse",
    "PdfMargins",
    "PdfOptions",
    "PdfUnit",
    "PdfValueWithUnits",
    "RenderOptions",
    "TemplatedImageRequest",
    "UnrecognizedSuccessResponse",
    "UnsupportedRequestTypeError",
    "UrlImageRequest",
    "ValidationError",
]
