"""
Data loading and preprocessing module.
Handles loading streaming content from JSONL and cleaning/normalizing the records.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON lines
from typing import Dict, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our ContentMetadata record used across the project
from .models import ContentMetadata  # structured content record
from .genres import normalize_genres  # canonical genre labels

# Console logging
from loguru import logger  # console logger


class ContentLoader:
	"""
	Handles loading and preprocessing of content metadata.
	"""

	def load_content_from_jsonl(self, filepath: str) -> List[ContentMetadata]:
		"""
		Load content from a JSON Lines (JSONL) file where each line is one JSON object.
		Returns a list of ContentMetadata objects.
		"""
		contents = []  # accumulator for parsed records
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Content data file not found: {filepath}")

		logger.info(f"[Loader] Loading content from {filepath}...")  # log action

		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # keep track of line number for diagnostics
				if not line.strip():  # blank lines are allowed
					continue
				try:
					data = json.loads(line)  # parse JSON object per line
					contents.append(self.parse_content(data))  # dict -> ContentMetadata
				except json.JSONDecodeError as e:
					logger.warning(f"[Loader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
					continue
				except (TypeError, ValueError, AttributeError) as e:
					logger.warning(f"[Loader] Error parsing content at line {line_num}: {e}")  # bad field types
					continue

		logger.info(f"[Loader] Successfully loaded {len(contents)} content items.")  # summary
		return contents

	def parse_content(self, data: Dict) -> ContentMetadata:
		"""
		Convert a raw dictionary into a ContentMetadata record.
		Accepts the camelCase keys used by streaming APIs ('contentId', 'duration', 'type').
		"""
		if not isinstance(data, dict):
			raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

		content_id = data.get('id', data.get('contentId'))
		if content_id in (None, ''):
			raise ValueError("Content record has no id")

		genres = normalize_genres(self._parse_comma_separated(data.get('genres')))
		keywords = [k.lower() for k in self._parse_comma_separated(data.get('keywords'))]

		runtime = data.get('runtime', data.get('duration'))  # 'duration' is the episode length
		language = data.get('language')

		return ContentMetadata(
			id=str(content_id),
			title=str(data.get('title') or '').strip(),
			description=(data.get('description') or data.get('overview') or None),
			genres=genres,
			language=language.strip().lower() if isinstance(language, str) and language.strip() else None,
			runtime=self._parse_int(runtime),
			year=self._parse_int(data.get('year')),
			rating=data.get('rating') or None,
			content_type=str(data.get('type') or data.get('content_type') or 'series'),
			platform=(str(data['platform']).lower() if data.get('platform') else None),
			keywords=keywords,
			thumbnail_url=data.get('thumbnailUrl') or data.get('thumbnail_url'),
		)

	def _parse_comma_separated(self, value) -> List[str]:
		"""
		Normalize a value that may be None, a list, or a comma-separated string
		into a list of clean strings.
		"""
		if value is None:
			return []
		if isinstance(value, list):
			return [str(item).strip() for item in value if item]
		if isinstance(value, str):
			return [item.strip() for item in value.split(',') if item.strip()]
		return []

	def _parse_int(self, value) -> Optional[int]:
		"""Integers, numeric strings and floats become int; missing values become None."""
		if value in (None, ''):
			return None
		return int(float(value))

	def get_all_platforms(self, contents: List[ContentMetadata]) -> List[str]:
		"""Return a sorted list of all platforms present in the catalog."""
		return sorted({c.platform for c in contents if c.platform})

	def get_all_genres(self, contents: List[ContentMetadata]) -> List[str]:
		"""Return a sorted list of all unique genres in the catalog."""
		genres = set()
		for c in contents:
			genres.update(c.genres)
		return sorted(genres)
