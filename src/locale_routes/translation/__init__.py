"""Translation — backend protocol, YAML catalogs, and catalog path translation."""
