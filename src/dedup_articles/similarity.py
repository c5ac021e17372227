"""Token-overlap title similarity."""

MIN_TOKEN_LENGTH = 4


def title_tokens(title: str | None) -> set[str]:
    """Lower-cased whitespace tokens longer than three characters."""
    if not title:
        return set()
    return {word for word in title.lower().split() if len(word) >= MIN_TOKEN_LENGTH}


def title_similarity(a: set[str], b: set[str]) -> float:
    """|a ∩ b| / max(|a|, |b|); 0.0 when both are empty."""
    denominator = max(len(a), len(b))
    if denominator == 0:
        return 0.0
    return len(a & b) / denominator
