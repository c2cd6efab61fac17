def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())
