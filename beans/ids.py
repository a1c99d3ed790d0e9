"""Bean identifiers, filenames and slugs."""

from __future__ import annotations

import re
import secrets
import unicodedata

ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
MAX_SLUG_BYTES = 50

_DASH_RUNS = re.compile(r"-+")


def new_id(prefix: str, length: int) -> str:
    """Generate a random identifier of the given length, prepended with prefix."""
    if length <= 0:
        raise ValueError("id length must be a positive integer")
    return prefix + "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def parse_filename(name: str) -> tuple[str, str]:
    """Split a bean filename into (id, slug).

    Understands "id--slug.md", "id.slug.md", the legacy "id-slug.md" and "id.md".
    """
    if name.endswith(".md"):
        name = name[: -len(".md")]

    index = name.find("--")
    if index > 0:
        return name[:index], name[index + 2 :]

    index = name.find(".")
    if index > 0:
        return name[:index], name[index + 1 :]

    bean_id, _, slug = name.partition("-")
    return bean_id, slug


def build_filename(bean_id: str, slug: str) -> str:
    """Build a filename of the form "id--slug.md", or "id.md" without a slug."""
    if not slug:
        return bean_id + ".md"
    return f"{bean_id}--{slug}.md"


def _keep(char: str) -> bool:
    return char == "-" or char.isalpha() or unicodedata.category(char) == "Nd"


def slugify(title: str) -> str:
    """Turn a title into a URL-friendly slug of at most 50 bytes."""
    text = title.lower().replace(" ", "-").replace("_", "-")
    text = "".join(char for char in text if _keep(char))
    text = _DASH_RUNS.sub("-", text).strip("-")

    encoded = text.encode("utf-8")
    if len(encoded) > MAX_SLUG_BYTES:
        text = encoded[:MAX_SLUG_BYTES].decode("utf-8", errors="ignore").rstrip("-")
    return text