"""
Test Configuration
==================

Pytest configuration with fixtures shared by the client test suite.
"""

import pytest
import structlog

from htmlcsstoimage.client import HtmlCssToImageClient
from htmlcsstoimage.config import settings as settings_module
from htmlcsstoimage.core.signing import SignedUrlGenerator
from htmlcsstoimage.models.requests import (
    HtmlCssImageRequest,
    PdfMargins,
    PdfOptions,
    PdfUnit,
    PdfValueWithUnits,
    RenderOptions,
)

from tests.utils.mocks import MockResponse, MockTransport

API_ID = "user_id"
API_KEY = "api_key"


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Route structlog through stdlib logging so stdout stays clean for CLI output."""
    structlog.configure(
        processors=[structlog.stdlib.filter_by_level, structlog.processors.KeyValueRenderer()],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep HCTI_ variables from the host environment out of the tests."""
    for name in ("HCTI_API_ID", "HCTI_API_KEY", "HCTI_BASE_URL", "HCTI_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HCTI_ENVIRONMENT", "testing")
    monkeypatch.setattr(settings_module, "settings", None)


@pytest.fixture
def mock_transport() -> MockTransport:
    """Transport answering with a single successful image response."""
    return MockTransport(
        MockResponse(200, {"id": "123", "url": "https://hcti.io/v1/image/123"})
    )


@pytest.fixture
def client(mock_transport: MockTransport) -> HtmlCssToImageClient:
    """Client wired to the mock transport."""
    return HtmlCssToImageClient(API_ID, API_KEY, transport=mock_transport)


@pytest.fixture
def signer() -> SignedUrlGenerator:
    return SignedUrlGenerator(API_ID, API_KEY)


@pytest.fixture
def sample_html_request() -> HtmlCssImageRequest:
    """HTML/CSS request with duplicated fonts and mixed-unit margins."""
    return HtmlCssImageRequest(
        html="<h1>Test</h1>",
        google_fonts=["Roboto", "Open Sans", "Open Sans"],
        options=RenderOptions(
            pdf_options=PdfOptions(
                margins=PdfMargins(
                    top=10,
                    bottom=10,
                    right=20,
                    left=PdfValueWithUnits(value=20, unit=PdfUnit.IN),
                )
            )
        ),
    )
