"""
Wire Models
===========

The exact JSON shapes transmitted to the rendering service. These are built by
``htmlcsstoimage.core.mapper`` and never by callers directly.
"""

from typing import Optional, List, Dict, Any, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.types import StrictInt, StrictFloat

from .requests import ColorScheme


class WireModel(BaseModel):
    """Base class for wire models; absent (``None``) fields are not transmitted."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict of this request."""
        return self.model_dump(mode="json", exclude_none=True)


class WirePdfOptions(WireModel):
    print_background: Optional[bool] = None
    scale: Optional[Union[StrictInt, StrictFloat]] = None
    # [top, right, bottom, left]
    margins: Optional[List[str]] = Field(None, min_length=4, max_length=4)
    page_height: Optional[str] = None
    page_width: Optional[str] = None


class WireRenderFields(WireModel):
    """Fields shared by the HTML/CSS and URL wire requests."""
    selector: Optional[str] = None
    device_scale: Optional[Union[StrictInt, StrictFloat]] = None
    viewport_height: Optional[int] = None
    viewport_width: Optional[int] = None
    max_wait_ms: Optional[int] = None
    ms_delay: Optional[int] = None
    render_when_ready: Optional[bool] = None
    max_render_once: Optional[bool] = None
    disable_twemoji: Optional[bool] = None
    color_scheme: Optional[ColorScheme] = None
    timezone: Optional[str] = None
    block_consent_banners: Optional[bool] = None
    pdf_options: Optional[WirePdfOptions] = None


class WireHtmlCssImageRequest(WireRenderFields):
    # Absent only inside a batch, where it is inherited from the batch defaults.
    html: Optional[str] = None
    css: Optional[str] = None
    google_fonts: Optional[str] = None


class WireUrlImageRequest(WireRenderFields):
    # Absent only inside a batch, where it is inherited from the batch defaults.
    url: Optional[str] = None
    full_screen: Optional[bool] = None


class WireTemplatedImageRequest(WireModel):
    template_id: str
    template_version: Optional[int] = None
    template_values: Dict[str, Any]

    def to_payload(self) -> Dict[str, Any]:
        # template_values go out untouched, nested nulls included
        payload: Dict[str, Any] = {"template_id": self.template_id}
        if self.template_version is not None:
            payload["template_version"] = self.template_version
        payload["template_values"] = self.template_values
        return payload


WireRequest = Union[WireHtmlCssImageRequest, WireUrlImageRequest, WireTemplatedImageRequest]


class WireBatchRequest(WireModel):
    """Body of ``POST /v1/image/batch``."""
    variations: List[WireRequest]
    default_options: Optional[WireRequest] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "variations": [variation.to_payload() for variation in self.variations]
        }
        if self.default_options is not None:
            payload["default_options"] = self.default_options.to_payload()
        return payload
