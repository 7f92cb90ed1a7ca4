"""
Streaming platform helpers: direct search links and availability filtering.
"""

from typing import Dict, Iterable, List, Optional  # type hints
from urllib.parse import quote  # URL-encode titles

from .models import ContentMetadata


# Search URL template per platform; {q} is the encoded title
PLATFORM_SEARCH_URLS: Dict[str, str] = {
	'netflix': 'https://www.netflix.com/search?q={q}',
	'disney': 'https://www.disneyplus.com/search?q={q}',
	'amazon': 'https://www.amazon.com/s?k={q}&i=instant-video',
	'hulu': 'https://www.hulu.com/search?q={q}',
	'hbo': 'https://www.hbomax.com/search?q={q}',
	'apple': 'https://tv.apple.com/search?term={q}',
}

KNOWN_PLATFORMS: List[str] = sorted(PLATFORM_SEARCH_URLS)


def direct_link(platform: Optional[str], title: str) -> str:
	"""Search link for the title on its platform, or '#' for unknown platforms."""
	template = PLATFORM_SEARCH_URLS.get((platform or '').lower())
	if template is None:
		return '#'
	return template.format(q=quote(title or '', safe=''))


def filter_by_platform(contents: Iterable[ContentMetadata], platforms: Optional[List[str]]) -> List[ContentMetadata]:
	"""Keep content available on one of the given platforms; an empty list keeps everything."""
	contents = list(contents)
	if not platforms:
		return contents
	wanted = {p.lower() for p in platforms}
	return [c for c in contents if (c.platform or '').lower() in wanted]
