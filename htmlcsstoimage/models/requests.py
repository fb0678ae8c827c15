"""
Request Models
==============

Public, immutable request variants accepted by the client.

Shared rendering behaviour (viewport, timing, PDF output, ...) lives in
``RenderOptions`` and is embedded by the HTML/CSS and URL variants through
their ``options`` field.
"""

from typing import Optional, List, Dict, Any, Union, Literal, Annotated
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.types import StrictInt, StrictFloat


# Enums
class ColorScheme(str, Enum):
    """Browser color scheme preference."""
    LIGHT = "light"
    DARK = "dark"


class PdfUnit(str, Enum):
    """Units accepted for physical PDF measurements."""
    PX = "px"
    IN = "in"
    CM = "cm"
    MM = "mm"


class _RequestModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# PDF Models
class PdfValueWithUnits(_RequestModel):
    """A length with an explicit unit, e.g. ``20in``."""
    value: Union[StrictInt, StrictFloat] = Field(..., description="Numeric length")
    unit: PdfUnit = Field(..., description="Length unit")


# A bare number is a pixel count.
PdfValueInput = Union[StrictInt, StrictFloat, PdfValueWithUnits]


class PdfMargins(_RequestModel):
    """Page margins; once given, all four sides are required."""
    top: PdfValueInput
    right: PdfValueInput
    bottom: PdfValueInput
    left: PdfValueInput


class PdfOptions(_RequestModel):
    """Options for generating a PDF from the HTML/CSS or URL."""
    print_background: Optional[bool] = Field(
        None, description="Print background graphics in the PDF output"
    )
    scale: Optional[Union[StrictInt, StrictFloat]] = Field(
        None, description="Scale factor applied to the PDF output"
    )
    margins: Optional[PdfMargins] = Field(None, description="Top, right, bottom and left margins")
    page_height: Optional[PdfValueInput] = Field(None, description="Page height")
    page_width: Optional[PdfValueInput] = Field(None, description="Page width")


# Shared Options
class RenderOptions(_RequestModel):
    """Rendering options shared by the HTML/CSS and URL request variants."""
    selector: Optional[str] = Field(
        None, description="CSS selector; the image is cropped to this element"
    )
    device_scale: Optional[Union[StrictInt, StrictFloat]] = Field(
        None, description="Pixel ratio of the screenshot (service default is 2)"
    )
    viewport_height: Optional[int] = Field(None, description="Chrome viewport height")
    viewport_width: Optional[int] = Field(None, description="Chrome viewport width")

    # Timing
    max_wait_ms: Optional[int] = Field(
        None, description="Upper bound on the wait before the screenshot is taken"
    )
    ms_delay: Optional[int] = Field(None, description="Extra delay before the screenshot")
    render_when_ready: Optional[bool] = Field(
        None, description="Wait until ScreenshotReady() is called from JavaScript"
    )
    max_render_once: Optional[bool] = Field(
        None, description="Only ever render and save the image once"
    )

    # Rendering behaviour
    disable_twemoji: Optional[bool] = Field(None, description="Disable the Twemoji fallback")
    color_scheme: Optional[ColorScheme] = Field(None, description="Force light or dark mode")
    timezone: Optional[str] = Field(None, description="IANA timezone, e.g. America/New_York")
    block_consent_banners: Optional[bool] = Field(
        None, description="Attempt to block cookie/consent banners"
    )

    pdf_options: Optional[PdfOptions] = Field(None, description="PDF output options")


# Request Variants
class HtmlCssImageRequest(_RequestModel):
    """Render an image from raw HTML and optional CSS."""
    request_type: Literal["html_css"] = "html_css"
    html: str = Field(..., description="Raw HTML content")
    css: Optional[str] = Field(None, description="CSS applied to the HTML")
    google_fonts: Optional[List[str]] = Field(
        None, description="Google Font names to load, e.g. ['Roboto', 'Open Sans']"
    )
    options: RenderOptions = Field(default_factory=RenderOptions)


class UrlImageRequest(_RequestModel):
    """Screenshot a public web page."""
    request_type: Literal["url"] = "url"
    url: str = Field(..., description="Address of the page to screenshot")
    full_screen: Optional[bool] = Field(
        None, description="Capture the full height of the page instead of the viewport"
    )
    options: RenderOptions = Field(default_factory=RenderOptions)


class TemplatedImageRequest(_RequestModel):
    """Render a stored template with the given values."""
    request_type: Literal["templated"] = "templated"
    template_id: str = Field(..., min_length=1, description="Template identifier")
    template_version: Optional[int] = Field(
        None, description="Template version; the latest version is used when omitted"
    )
    template_values: Dict[str, Any] = Field(..., description="Values injected into the template")


ImageRequest = Annotated[
    Union[HtmlCssImageRequest, UrlImageRequest, TemplatedImageRequest],
    Field(discriminator="request_type"),
]

BatchableImageRequest = Union[HtmlCssImageRequest, UrlImageRequest]

image_request_adapter: TypeAdapter = TypeAdapter(ImageRequest)


def parse_image_request(data: Dict[str, Any]) -> Union[
    HtmlCssImageRequest, UrlImageRequest, TemplatedImageRequest
]:
    """Build a request variant from a plain mapping tagged with ``request_type``."""
    return image_request_adapter.validate_python(data)
