"""URL construction for the placeholder image service.

Generated URL shapes:

    category given                   /i/category/<category>?seed=<seed>
    no category, width=height=0      /i[?text=...]
    no category, width=height=N      /i/N.png[?text=...]
    no category, width!=height       /i/WxH.png[?text=...]
    video                            /video.mp4?seed=<seed>

Two quirks of the service contract are preserved on purpose:

- A category request is addressed by seed only. Width, height, word and
  randomize are dropped, so callers cannot size or caption category images.
- Standard sized images always use the ``.png`` extension; ``format`` is
  validated but does not change the path.
"""

from typing import Any
from urllib.parse import quote_plus, urlencode

from aws_lambda_powertools import Logger

from fillthis.models.image import ImageRequest
from fillthis.utils.constants import (
    BASE_URL,
    CATEGORY_PATH,
    IMAGE_PATH,
    STANDARD_IMAGE_EXTENSION,
    VIDEO_PATH,
)
from fillthis.utils.random_sources import SeedSource, WordSource, lorem_word, uuid4_seed
from fillthis.utils.validators import validate_request

logger = Logger(UTC=True)


class ImageUrlBuilder:
    """Builds image and video URLs from request parameters.

    Performs no I/O. The only side effects are calls to the injected
    seed and word sources.
    """

    def __init__(
        self,
        *,
        seed_source: SeedSource | None = None,
        word_source: WordSource | None = None,
        base_url: str = BASE_URL,
    ) -> None:
        self._seed_source = seed_source or uuid4_seed
        self._word_source = word_source or lorem_word
        self._base_url = base_url

    def build_image_url(self, request: ImageRequest) -> str:
        """Return the URL serving the image described by ``request``."""
        if request.category is not None:
            path = CATEGORY_PATH + quote_plus(request.category)
            query = "?" + urlencode({"seed": self._seed_source()})
        else:
            path = self._size_path(request.width, request.height)
            query = self._text_query(request.word, request.randomize)

        url = self._base_url + path + query
        logger.debug(
            "Generated image URL",
            extra={"url": url, "category": request.category, "format": request.format},
        )
        return url

    def build_video_url(self) -> str:
        """Return a seed-addressed placeholder video URL."""
        return self._base_url + VIDEO_PATH + "?" + urlencode({"seed": self._seed_source()})

    @staticmethod
    def _size_path(width: int, height: int) -> str:
        if width == 0 and height == 0:
            return IMAGE_PATH

        size = str(width) if width == height else f"{width}x{height}"
        return f"{IMAGE_PATH}/{size}.{STANDARD_IMAGE_EXTENSION}"

    def _text_query(self, word: str | None, randomize: bool) -> str:
        text_parts: list[str] = []
        if word is not None:
            text_parts.append(word)
        if randomize:
            text_parts.append(self._word_source())

        if not text_parts:
            return ""
        return "?" + urlencode({"text": " ".join(text_parts)})


def build_image_url(
    request: ImageRequest,
    *,
    seed_source: SeedSource | None = None,
    word_source: WordSource | None = None,
) -> str:
    """Build an image URL for ``request`` using the given or default sources."""
    builder = ImageUrlBuilder(seed_source=seed_source, word_source=word_source)
    return builder.build_image_url(request)


def build_video_url(*, seed_source: SeedSource | None = None) -> str:
    """Build a placeholder video URL using the given or default seed source."""
    return ImageUrlBuilder(seed_source=seed_source).build_video_url()


def image_url(
    *,
    seed_source: SeedSource | None = None,
    word_source: WordSource | None = None,
    **fields: Any,
) -> str:
    """Build an image URL from keyword request fields.

    Example:
        image_url(width=800, height=600, randomize=False, word="TestText")
        -> https://fillthis.io/i/800x600.png?text=TestText

    Raises:
        ValidationError: If a field has an invalid value
        InvalidFormatError: If the format is not supported
    """
    request = validate_request(ImageRequest, fields)
    return build_image_url(request, seed_source=seed_source, word_source=word_source)
