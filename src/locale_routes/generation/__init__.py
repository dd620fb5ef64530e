"""Generation — locale variants for a route, deduplicated and ordered."""
