"""Path string helpers: separator normalization and relative/absolute conversion.

Nothing here touches the filesystem.
"""

from __future__ import annotations

from .constants import ALT_SEPARATORS, SEP


def sanitize_path(path: str, is_file: bool = False) -> str:
    """Convert every separator to the native one and trim whitespace.

    Directory paths (``is_file`` false) get a trailing separator unless empty.
    """
    for alt in ALT_SEPARATORS:
        path = path.replace(alt, SEP)
    path = path.strip()
    if not is_file and path and not path.endswith(SEP):
        path += SEP
    return path


def get_file_name(path: str) -> str:
    """Return the text after the last separator, or ``path`` itself."""
    cut = max(path.rfind(sep) for sep in (*ALT_SEPARATORS, SEP))
    return path[cut + 1 :] if cut >= 0 else path


def get_file_ext(path: str) -> str:
    """Return the extension of the file name without the dot, or ''."""
    name = get_file_name(path)
    dot = name.rfind(".")
    return name[dot + 1 :] if dot >= 0 else ""


def _split_absolute(path: str) -> list[str]:
    # The leading "" of a rooted path is kept so joining restores the root.
    parts = sanitize_path(path).split(SEP)
    return parts[:1] + [p for p in parts[1:] if p]


def _split_relative(path: str) -> list[str]:
    return [p for p in sanitize_path(path).split(SEP) if p and p != "."]


def convert_to_relative_path(from_path: str, to_path: str) -> str:
    """Express directory ``to_path`` relative to directory ``from_path``.

    Components are compared by exact string equality.
    """
    from_parts = _split_absolute(from_path)
    to_parts = _split_absolute(to_path)

    common = 0
    for a, b in zip(from_parts, to_parts):
        if a != b:
            break
        common += 1

    parts = [".."] * (len(from_parts) - common) + to_parts[common:]
    return sanitize_path(SEP.join(parts))


def convert_to_absolute_path(base: str, relative: str) -> str:
    """Resolve ``relative`` against directory ``base``.

    Raises ValueError when ``relative`` climbs above the root of ``base``.
    """
    parts = _split_absolute(base)
    for part in _split_relative(relative):
        if part == "..":
            if not parts or parts == [""]:
                raise ValueError(f"{relative!r} climbs above {base!r}")
            parts.pop()
        else:
            parts.append(part)
    if parts == [""]:
        return SEP
    return sanitize_path(SEP.join(parts))
