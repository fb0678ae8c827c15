"""
Client Exceptions
=================

Raised only for local misuse. Rejections by the rendering service are returned
as error responses, and transport failures propagate unchanged.
"""


class HtmlCssToImageError(Exception):
    """Base exception for the client."""

    pass


class ClientConfigurationError(HtmlCssToImageError):
    """Raised when credentials or the transport are missing or invalid."""

    pass


class UnsupportedRequestTypeError(HtmlCssToImageError, TypeError):
    """Raised when a value that is not a known request variant is mapped."""

    pass
