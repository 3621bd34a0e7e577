import io
import logging
from urllib.parse import urlparse

import requests
from PIL import Image, ImageDraw, UnidentifiedImageError

from .core import EXECUTOR, HTTP_TIMEOUT
from .errors import ImageError

logger = logging.getLogger(__name__)

PLACEHOLDER_SIZE = (256, 256)

# Rendered once on first use
_PLACEHOLDER_PNG = None


def fetch_image(url: str, timeout=None):
    """Download an image and make sure it decodes.
    Returns (bytes, mimetype). Raises ImageError for a bad URL, a failed
    request, a non-2xx status or bytes Pillow cannot read. Nothing is cached:
    every profile display downloads the artwork again.
    """
    if not url or urlparse(url).scheme not in {'http', 'https'}:
        raise ImageError(url or '', 'not an http(s) URL')
    try:
        r = requests.get(url, timeout=timeout or HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise ImageError(url, str(e)) from e
    if not 200 <= r.status_code < 300:
        raise ImageError(url, f'HTTP {r.status_code}')
    data = r.content
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
            img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise ImageError(url, f'cannot decode image: {e}') from e
    mimetype = Image.MIME.get(fmt) or r.headers.get('Content-Type') or 'application/octet-stream'
    return data, mimetype


def submit_image(url: str, timeout=None):
    return EXECUTOR.submit(fetch_image, url, timeout)


def placeholder_image():
    """PNG bytes of the fixed "unknown" picture shown when artwork fails to load."""
    global _PLACEHOLDER_PNG
    if _PLACEHOLDER_PNG is not None:
        return _PLACEHOLDER_PNG, 'image/png'
    w, h = PLACEHOLDER_SIZE
    img = Image.new('RGBA', PLACEHOLDER_SIZE, (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.ellipse((8, 8, w - 8, h - 8), fill=(224, 224, 224, 255), outline=(160, 160, 160, 255), width=6)
    # Question mark drawn from shapes, no font needed
    draw.arc((w * 0.34, h * 0.2, w * 0.66, h * 0.52), start=180, end=90, fill=(120, 120, 120, 255), width=14)
    draw.line((w * 0.5, h * 0.52, w * 0.5, h * 0.64), fill=(120, 120, 120, 255), width=14)
    draw.ellipse((w * 0.46, h * 0.72, w * 0.54, h * 0.8), fill=(120, 120, 120, 255))
    buf = io.BytesIO()
    img.save(buf, format='PNG')
    _PLACEHOLDER_PNG = buf.getvalue()
    return _PLACEHOLDER_PNG, 'image/png'
