"""Top-level package for seourl.

This package turns multilingual titles into lowercase, ASCII-only,
hyphen-delimited URL slugs. The pure entry points are `generate_url`,
`generate_slug`, and `is_valid_seo_url`; `SeoUrlGenerator` binds them to a
configuration.
"""

from .detector import detect_language
from .generator import SeoUrlGenerator
from .languages import LanguageCode
from .slug import generate_slug, generate_url, is_valid_seo_url
from .transliteration import transliterate

__all__ = [
    "LanguageCode",
    "SeoUrlGenerator",
    "__version__",
    "detect_language",
    "generate_slug",
    "generate_url",
    "is_valid_seo_url",
    "transliterate",
]

__version__ = "0.1.0"
