"""
Small string helpers shared by the path resolver and include scanner.
"""

def last_separator_index(path: str) -> int:
    """Index of the last '/' or '\\' in path, or -1."""
    # Both separators count on every platform
    return max(path.rfind("/"), path.rfind("\\"))


def split_name(path: str) -> str:
    """Everything after the last separator (may be empty)."""
    return path[last_separator_index(path) + 1 :]


def extension_of(name: str) -> str:
    """
    Final '.ext' suffix of a file name, or '' if it has none.

    A leading dot alone does not start an extension ('.gitignore' has
    none), and '.' / '..' never have one.
    """
    if name in (".", ".."):
        return ""
    index = name.rfind(".")
    if index <= 0:
        return ""
    return name[index:]


def normalize_separators(path: str) -> str:
    """Convert backslashes to forward slashes."""
    return path.replace("\\", "/")


def string_between(text: str, start: str, end: str) -> str | None:
    """
    Substring between the first occurrence of start and the next end.

    ("The quick brown fox", "The ", " brown") -> "quick"

    Returns:
        The enclosed substring, or None when start or a following end
        is missing
    """
    begin = text.find(start)
    if begin == -1:
        return None
    begin += len(start)
    finish = text.find(end, begin)
    if finish == -1:
        return None
    return text[begin:finish]


def is_empty_or_whitespace(value: str) -> bool:
    return not value or value.isspace()


def string_before(text: str, marker: str) -> str | None:
    """
    Substring preceding the first occurrence of marker.

    ("The quick brown fox", "brown") -> "The quick "
    """
    index = text.find(marker)
    if index == -1:
        return None
    return text[:index]


def string_after(text: str, marker: str) -> str | None:
    """
    Substring following the first occurrence of marker.

    ("The quick brown fox", "brown") -> " fox"
    """
    index = text.find(marker)
    if index == -1:
        return None
    return text[index + len(marker) :]


def is_alphanumeric(value: str) -> bool:
    """True for a non-empty string of ASCII letters and digits only."""
    return value.isascii() and value.isalnum()
