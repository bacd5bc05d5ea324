"""URL-safe slug generation from article titles.

The slug names the bundle folder and the thumbnail, so the algorithm must
stay byte-for-byte stable: changing it would move existing articles.
"""

import re

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def generate_slug(title: str) -> str:
    """Convert a title into a slug of lowercase letters, digits and hyphens.

    Examples:
        >>> generate_slug("How to Optimize Your Website for SEO!")
        'how-to-optimize-your-website-for-seo'
        >>> generate_slug("What's New in React 18?")
        'whats-new-in-react-18'

    Args:
        title: Any string, including an empty one.

    Returns:
        The slug, possibly empty when the title has no ASCII letters or digits.
    """
    slug = title.lower()
    slug = _DISALLOWED.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")
