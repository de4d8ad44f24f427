from pathlib import Path

DEFAULT_EXTENSIONS = (
    ".html", ".css", ".js", ".txt", ".ttf", ".atom",
    ".stl", ".xml", ".svg", ".eot", ".json",
)


def zippable_extensions(config, default=DEFAULT_EXTENSIONS) -> frozenset:
    """Resolve the allow-list from a ``{"gzip": {"extensions": [...]}}`` mapping.

    Missing or empty keys fall back to ``default``. A comma-joined string is
    split so callers may pass either form.
    """
    extensions = None
    gzip_config = (config or {}).get("gzip")
    if gzip_config:
        extensions = gzip_config.get("extensions")
    if isinstance(extensions, str):
        extensions = [ext.strip() for ext in extensions.split(",") if ext.strip()]
    if not extensions:
        extensions = default
    return frozenset(extensions)


def is_zippable(path, extensions) -> bool:
    return Path(path).suffix in extensions
