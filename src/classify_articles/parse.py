"""Strict parsing of the oracle's positional JSON array."""

import json
import re

from pydantic import ValidationError

from classify_articles.models import OracleClassification
from common.errors import ClassificationError

CODE_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding Markdown code block if present."""
    return CODE_FENCE_PATTERN.sub("", text.strip()).strip()


def parse_classifications(text: str | None, expected: int) -> tuple[list[OracleClassification], list]:
    """Parse and validate the oracle response for a chunk of `expected` items.

    Returns:
        Validated classifications and the raw decoded objects, both in input order.

    Raises:
        ClassificationError: empty, non-JSON, non-array, wrong length or invalid element.
    """
    if not text or not text.strip():
        raise ClassificationError("Empty oracle response")

    try:
        data = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        raise ClassificationError(f"Oracle response is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ClassificationError(f"Oracle response is a {type(data).__name__}, expected an array")
    if len(data) != expected:
        raise ClassificationError(f"Oracle returned {len(data)} classifications for {expected} articles")

    classifications = []
    for position, element in enumerate(data, 1):
        try:
            classifications.append(OracleClassification.model_validate(element))
        except ValidationError as e:
            raise ClassificationError(
                f"Invalid classification for article {position}: {e.errors()[0]['msg']}"
            ) from e
    return classifications, data
