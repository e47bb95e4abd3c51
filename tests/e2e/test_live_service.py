"""Live checks against fillthis.io.

Run with:
    FILLTHIS_E2E=1 pytest tests/e2e
"""

import os

import pytest
import requests

from fillthis import ImageRequest, build_image_url, fetch_image

pytestmark = pytest.mark.skipif(
    os.getenv("FILLTHIS_E2E") != "1",
    reason="set FILLTHIS_E2E=1 to call the live service",
)


def test_generated_url_is_served() -> None:
    url = build_image_url(ImageRequest(width=200, height=100, randomize=False, word="e2e"))

    response = requests.get(url, timeout=30, allow_redirects=True)

    assert response.status_code == 200
    assert response.headers.get("Content-Type", "").startswith("image/")


def test_download_standard_image(tmp_path) -> None:
    result = fetch_image(str(tmp_path), width=200, height=200, randomize=False)

    assert result, result.error
    assert os.path.getsize(result.path) > 0


def test_download_category_image(tmp_path) -> None:
    result = fetch_image(
        str(tmp_path),
        width=0,
        height=0,
        category="fashion",
        return_full_path=False,
    )

    assert result, result.error
    assert (tmp_path / result.path).exists()
