"""gif_scout.parser: HTML parsing helpers."""
