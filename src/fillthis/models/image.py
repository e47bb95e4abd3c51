"""Image request and download result models."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

from fillthis.utils.constants import DEFAULT_FORMAT, DEFAULT_HEIGHT, DEFAULT_WIDTH
from fillthis.utils.formats import normalize_format


class ImageRequest(BaseModel):
    """Parameters describing a single placeholder image.

    When ``category`` is set the service addresses the image by seed, so
    ``width``, ``height``, ``randomize`` and ``word`` have no effect on the
    generated URL. ``format`` is validated but standard images are always
    served as PNG. ``gray`` is accepted and currently unused.
    """

    model_config = ConfigDict(frozen=True)

    width: StrictInt = Field(DEFAULT_WIDTH, ge=0, description="Logical image width")
    height: StrictInt = Field(DEFAULT_HEIGHT, ge=0, description="Logical image height")
    category: str | None = Field(None, description="Category name, including 'all'")
    randomize: StrictBool = Field(True, description="Append a random word to the text")
    word: str | None = Field(None, description="Text to render on the image")
    gray: StrictBool = Field(False, description="Gray background mode (inert)")
    format: str = Field(DEFAULT_FORMAT, description="One of jpg, jpeg, png, webp")

    @field_validator("format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        # InvalidFormatError is not a ValueError, so pydantic lets it propagate.
        return normalize_format(value)


class DownloadResult(BaseModel):
    """Outcome of a download attempt.

    Evaluates as true only when the image was written to disk.
    """

    success: bool = Field(..., description="Whether the image was saved")
    url: str = Field(..., description="URL that was fetched")
    path: str | None = Field(None, description="Full path or bare filename of the saved image")
    full_path: bool = Field(True, description="Whether `path` is a full path")
    error_code: str | None = Field(None, description="Error code when the download failed")
    error: str | None = Field(None, description="Error message when the download failed")

    def __bool__(self) -> bool:
        return self.success
