"""Product image resizer: letterboxed product photos and LLM listing copy."""
