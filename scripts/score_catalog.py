"""
Score the content catalog for food-friendliness.

This script:
1) Loads content from data/content.jsonl (or the path given as first argument)
2) Classifies every item
3) Logs the catalog ordered by food-friendly score with the reasoning behind each score

Usage:
    python -m scripts.score_catalog [path/to/content.jsonl]
"""

import sys  # optional path argument
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from mealstream.data_loader import ContentLoader  # data ingestion
from mealstream.classifier import FoodFriendlyClassifier  # scoring


def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	logger.info("=" * 60)
	logger.info("Score Content Catalog")
	logger.info("=" * 60)

	root = Path(__file__).resolve().parents[1]  # project root
	data_path = Path(argv[0]) if argv else root / 'data' / 'content.jsonl'

	# 1) Load data
	logger.info("[1/3] Loading content...")
	loader = ContentLoader()
	contents = loader.load_content_from_jsonl(str(data_path))
	logger.info(f"[OK] Loaded {len(contents)} items | platforms={loader.get_all_platforms(contents)}")
	logger.info(f"[OK] Genres: {loader.get_all_genres(contents)}")

	# 2) Classify
	logger.info("[2/3] Classifying...")
	classifier = FoodFriendlyClassifier()
	scored = [(c, classifier.classify(c)) for c in contents]
	scored.sort(key=lambda pair: pair[1].overall_score, reverse=True)

	# 3) Report
	logger.info("[3/3] Results")
	for i, (content, score) in enumerate(scored, 1):
		logger.info(
			f"  {i}. [{score.overall_score:>4}] {content.title} ({content.platform or '-'}, {content.runtime or '?'} min) "
			f"| confidence={score.confidence:.2f} eating_scenes={score.eating_scenes}"
		)
		for reason in score.reasoning:
			logger.info(f"       - {reason}")

	logger.info("=" * 60)
	return scored


if __name__ == '__main__':
	main()
