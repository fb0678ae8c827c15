"""
HTML/CSS to Image Client
========================

Async client for the hcti.io rendering API: single and batch image creation
over an injectable transport, plus offline signed-URL generation.
"""

import base64
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence, Type, Union

import aiohttp
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from htmlcsstoimage.config.logging import get_logger
from htmlcsstoimage.config.settings import DEFAULT_BASE_URL, ClientSettings
from htmlcsstoimage.core.mapper import map_to_wire
from htmlcsstoimage.core.signing import SignedUrlGenerator
from htmlcsstoimage.core.transport import AiohttpTransport, Transport, TransportResponse
from htmlcsstoimage.exceptions import ClientConfigurationError
from htmlcsstoimage.models.requests import (
    BatchableImageRequest,
    HtmlCssImageRequest,
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
)
from htmlcsstoimage.models.wire import WireBatchRequest

logger = get_logger(__name__)

AnyImageRequest = Union[HtmlCssImageRequest, UrlImageRequest, TemplatedImageRequest]


def unexpected_response_body(status: int) -> Dict[str, Any]:
    """Error body used when the service answers with something that is not JSON."""
    return {
        "error": "Internal Server Error",
        "message": f"The server returned an unexpected response (Status: {status}).",
    }


async def normalize_response(
    response: TransportResponse, success_model: Type[BaseModel]
) -> Union[BaseModel, UnrecognizedSuccessResponse, CreateImageErrorResponse]:
    """
    Convert an HTTP response into a success or error response model.

    The HTTP status alone decides which one; every parsed body field is kept.
    A 2xx body that does not fit ``success_model`` becomes an
    ``UnrecognizedSuccessResponse`` carrying the body as it was sent.
    A body that is not a JSON object is replaced by a synthesized error body
    mentioning the status code.
    """
    try:
        body = await response.json()
    except (ValueError, aiohttp.ContentTypeError):
        body = None
    if not isinstance(body, dict):
        body = unexpected_response_body(response.status)

    if response.ok:
        try:
            return success_model.model_validate({**body, "success": True})
        except PydanticValidationError:
            logger.warning(
                "Success response has an unexpected shape", status=response.status
            )
            return UnrecognizedSuccessResponse.model_validate({**body, "success": True})

    error_body = {**body, "success": False}
    if error_body.get("error") is None:
        error_body["error"] = "Request failed"
    return CreateImageErrorResponse.model_validate(error_body)


class BaseImageClient(ABC):
    """Operations offered by an image rendering client."""

    @abstractmethod
    async def create_image(self, request: AnyImageRequest) -> CreateImageResponse:
        """Create a single image."""

    @abstractmethod
    async def create_image_batch(
        self,
        variations: Sequence[BatchableImageRequest],
        default_options: Optional[BatchableImageRequest] = None,
    ) -> CreateImageBatchResponse:
        """Create several images in one call."""

    @abstractmethod
    def create_templated_image_url(
        self,
        template_id_or_request: Union[str, TemplatedImageRequest],
        template_values: Optional[Dict[str, Any]] = None,
        template_version: Optional[int] = None,
    ) -> str:
        """Build a signed URL rendering a template."""

    @abstractmethod
    def create_and_render_url(self, request: UrlImageRequest) -> str:
        """Build a signed URL screenshotting a page."""


class HtmlCssToImageClient(BaseImageClient):
    """
    Client for the hcti.io API.

    Instances hold only immutable configuration, so concurrent calls on one
    client are independent.
    """

    def __init__(
        self,
        api_id: str,
        api_key: str,
        transport: Optional[Transport] = None,
        base_url: str = DEFAULT_BASE_URL,
    ):
        if not api_id or not api_key:
            raise ClientConfigurationError("Both api_id and api_key are required")

        if transport is None:
            transport = AiohttpTransport()
        if not callable(transport):
            raise ClientConfigurationError(
                "The transport must be an async callable "
                "transport(url, method=..., headers=..., body=...)"
            )

        self._api_id = api_id
        self._transport = transport
        self._base_url = base_url.rstrip("/")
        self._signer = SignedUrlGenerator(api_id, api_key, self._base_url)

        credentials = base64.b64encode(f"{api_id}:{api_key}".encode("utf-8")).decode("ascii")
        self._auth_header = f"Basic {credentials}"
        self.logger: Any = logger.bind(component="hcti_client", api_id=api_id)

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, transport: Optional[Transport] = None
    ) -> "HtmlCssToImageClient":
        """Create a client from settings; credentials must be present."""
        if not settings.api_id or not settings.api_key:
            raise ClientConfigurationError(
                "Missing environment variables HCTI_API_ID or HCTI_API_KEY"
            )
        if transport is None:
            transport = AiohttpTransport(timeout=settings.request_timeout)
        return cls(settings.api_id, settings.api_key, transport, settings.base_url)

    @classmethod
    def from_env(cls, transport: Optional[Transport] = None) -> "HtmlCssToImageClient":
        """Create a client from the ``HCTI_API_ID`` and ``HCTI_API_KEY`` environment variables."""
        return cls.from_settings(ClientSettings(), transport)

    @property
    def api_id(self) -> str:
        return self._api_id

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def auth_header(self) -> str:
        return self._auth_header

    async def _post(self, path: str, payload: Dict[str, Any]) -> TransportResponse:
        url = f"{self._base_url}{path}"
        self.logger.debug("Sending request", url=url)
        return await self._transport(
            url,
            method="POST",
            headers={
                "Authorization": self._auth_header,
                "Content-Type": "application/json",
            },
            body=json.dumps(payload),
        )

    async def create_image(self, request: AnyImageRequest) -> CreateImageResponse:
        """
        Create a single image.

        Args:
            request: HTML/CSS, URL or templated request

        Returns:
            Success response with the image ``id`` and ``url``, or an error response

        Raises:
            UnsupportedRequestTypeError: If ``request`` is not a known variant
        """
        wire_request = map_to_wire(request, in_batch=False)
        response = await self._post("/v1/image", wire_request.to_payload())

        result = await normalize_response(response, CreateImageSuccessResponse)
        if not result.success:
            self.logger.warning(
                "Image creation rejected", status=response.status, error=result.error
            )
        return result

    async def create_image_batch(
        self,
        variations: Sequence[BatchableImageRequest],
        default_options: Optional[BatchableImageRequest] = None,
    ) -> CreateImageBatchResponse:
        """
        Create several images in one call.

        Variations with an empty ``html``/``url`` inherit it from ``default_options``.
        An empty ``variations`` list returns an empty success without calling the API.
        """
        if not variations:
            return CreateImageBatchSuccessResponse(images=[])

        batch_request = WireBatchRequest(
            variations=[map_to_wire(variation, in_batch=True) for variation in variations],
            default_options=(
                map_to_wire(default_options, in_batch=True)
                if default_options is not None
                else None
            ),
        )
        response = await self._post("/v1/image/batch", batch_request.to_payload())

        result = await normalize_response(response, CreateImageBatchSuccessResponse)
        if not result.success:
            self.logger.warning(
                "Batch image creation rejected",
                status=response.status,
                error=result.error,
                variations=len(variations),
            )
        return result

    def create_templated_image_url(
        self,
        template_id_or_request: Union[str, TemplatedImageRequest],
        template_values: Optional[Dict[str, Any]] = None,
        template_version: Optional[int] = None,
    ) -> str:
        """Build a signed URL rendering a template; no API call is made."""
        return self._signer.templated_image_url(
            template_id_or_request, template_values, template_version
        )

    def create_and_render_url(self, request: UrlImageRequest) -> str:
        """Build a signed URL screenshotting ``request.url``; no API call is made."""
        return self._signer.create_and_render_url(request)
