"""
Signed URL Generator
====================

Offline generation of pre-authorized image URLs. The service validates the
HMAC-SHA256 token against the query string on first fetch and renders the
image then, so no API call is made here.

Query strings must be byte-identical for identical input, hence the sorted
keys and the fixed value serialization below.
"""

import hashlib
import hmac
import json
from typing import Any, Dict, List, Optional, Tuple, Union
from enum import Enum
from urllib.parse import quote, quote_plus, urlencode

from htmlcsstoimage.config.settings import DEFAULT_BASE_URL
from htmlcsstoimage.core.normalizers import format_number
from htmlcsstoimage.models.requests import TemplatedImageRequest, UrlImageRequest

# Fields never sent through the create-and-render query string.
CREATE_AND_RENDER_EXCLUDED_FIELDS = frozenset({"url", "pdf_options", "request_type"})


def form_quote(
    string: str,
    safe: str = "",
    encoding: Optional[str] = None,
    errors: Optional[str] = None,
) -> str:
    """
    application/x-www-form-urlencoded quoting as browsers do it.

    Only ASCII alphanumerics and ``*-._`` stay literal; spaces become ``+``.
    """
    return quote_plus(string, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def stringify_value(value: Any) -> str:
    """Render a primitive as a query parameter value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def stringify_template_value(value: Any) -> str:
    """Structured values are sent as compact JSON, primitives as-is."""
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return stringify_value(value)


class SignedUrlGenerator:
    """Builds signed templated-image and create-and-render URLs."""

    def __init__(self, api_id: str, api_key: str, base_url: str = DEFAULT_BASE_URL):
        self.api_id = api_id
        self._api_key = api_key.encode("utf-8")
        self.base_url = base_url.rstrip("/")

    def generate_token(self, query_string: str) -> str:
        """HMAC-SHA256 hex digest of ``query_string`` keyed with the API key."""
        return hmac.new(self._api_key, query_string.encode("utf-8"), hashlib.sha256).hexdigest()

    def templated_image_url(
        self,
        template_id_or_request: Union[str, TemplatedImageRequest],
        template_values: Optional[Dict[str, Any]] = None,
        template_version: Optional[int] = None,
    ) -> str:
        """
        Build a signed URL rendering a template.

        Args:
            template_id_or_request: Template id, or a complete templated request
            template_values: Values for the template when an id is given
            template_version: Template version when an id is given

        Returns:
            ``{base}/v1/image/{template_id}/{token}?{query}``
        """
        if isinstance(template_id_or_request, TemplatedImageRequest):
            request = template_id_or_request
        else:
            request = TemplatedImageRequest(
                template_id=template_id_or_request,
                template_values=template_values or {},
                template_version=template_version,
            )

        params: List[Tuple[str, str]] = []
        if request.template_version is not None:
            params.append(("template_version", str(request.template_version)))
        for key in sorted(request.template_values):
            value = request.template_values[key]
            if value is not None:
                params.append((key, stringify_template_value(value)))

        query_string = urlencode(params, quote_via=form_quote)
        token = self.generate_token(query_string)
        url = f"{self.base_url}/v1/image/{quote(request.template_id, safe='')}/{token}"
        return f"{url}?{query_string}" if query_string else url

    def create_and_render_url(self, request: UrlImageRequest) -> str:
        """
        Build a signed URL that screenshots ``request.url`` on first fetch.

        PDF options cannot be expressed through this endpoint and are left out.
        ``None`` and ``False`` fields are omitted; ``True`` is sent as ``true``.
        """
        fields: Dict[str, Any] = {"full_screen": request.full_screen}
        fields.update(
            (name, getattr(request.options, name)) for name in type(request.options).model_fields
        )

        params: List[Tuple[str, str]] = [("url", request.url)]
        for name in sorted(fields):
            value = fields[name]
            if name in CREATE_AND_RENDER_EXCLUDED_FIELDS or value is None or value is False:
                continue
            params.append((name, stringify_value(value)))

        query_string = urlencode(params, quote_via=form_quote)
        token = self.generate_token(query_string)
        return (
            f"{self.base_url}/v1/image/create-and-render/{self.api_id}/{token}?{query_string}"
        )
