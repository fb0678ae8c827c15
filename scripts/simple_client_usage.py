#!/usr/bin/env python3
"""
Simple Client Usage
===================

Creates an image from HTML/CSS, screenshots a URL and prints a signed
create-and-render URL. Reads HCTI_API_ID / HCTI_API_KEY from the environment.
"""

import asyncio

from htmlcsstoimage import (
    HtmlCssImageRequest,
    HtmlCssToImageClient,
    RenderOptions,
    UrlImageRequest,
)
from htmlcsstoimage.config.logging import setup_logging


CARD_CSS = """
.card {
  font-family: 'Inter', sans-serif;
  padding: 40px;
  background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
  color: white;
  border-radius: 12px;
}
h1 { margin: 0 0 10px; }
p { margin: 0; opacity: 0.9; }
"""


async def main() -> None:
    setup_logging()
    client = HtmlCssToImageClient.from_env()

    html_request = HtmlCssImageRequest(
        html='<div class="card"><h1>Hello World!</h1><p>Generated with htmlcsstoimage</p></div>',
        css=CARD_CSS,
        google_fonts=["Inter"],
    )
    print("Creating image from HTML/CSS...")
    result = await client.create_image(html_request)
    if result.success:
        print(f"Image created: {result.url}")
    else:
        print(f"Error: {result.error}")

    url_request = UrlImageRequest(
        url="https://example.com",
        options=RenderOptions(viewport_width=1280, viewport_height=800),
    )
    print("\nTaking screenshot of URL...")
    result = await client.create_image(url_request)
    if result.success:
        print(f"Screenshot created: {result.url}")
    else:
        print(f"Error: {result.error}")

    signed_url = client.create_and_render_url(
        UrlImageRequest(url="https://example.com", options=RenderOptions(viewport_width=800))
    )
    print(f"\nSigned URL (renders on first request): {signed_url}")


if __name__ == "__main__":
    asyncio.run(main())
