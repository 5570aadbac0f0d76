"""Attachment categorization: pure Python, no framework dependencies.

``categorize`` is total: any combination of content-type and file name,
including ``None`` for both, maps to exactly one label in CATEGORIES.
"""

from typing import Callable, Dict, FrozenSet, List, Optional, Tuple

CATEGORIES = (
    "image",
    "video",
    "audio",
    "pdf",
    "document",
    "spreadsheet",
    "presentation",
    "archive",
    "other",
)

# Evaluated top to bottom, first match wins
CONTENT_TYPE_RULES: List[Tuple[Callable[[str], bool], str]] = [
    (lambda ct: ct.startswith("image/"), "image"),
    (lambda ct: ct.startswith("video/"), "video"),
    (lambda ct: ct.startswith("audio/"), "audio"),
    (lambda ct: ct.startswith("application/pdf"), "pdf"),
    (lambda ct: "document" in ct or "word" in ct or ct == "text/plain", "document"),
    (lambda ct: "spreadsheet" in ct or "excel" in ct, "spreadsheet"),
    (lambda ct: "presentation" in ct or "powerpoint" in ct, "presentation"),
    (lambda ct: "zip" in ct or "compressed" in ct, "archive"),
]

EXTENSION_CATEGORIES: Dict[str, FrozenSet[str]] = {
    "image": frozenset({"jpg", "jpeg", "png", "gif", "webp", "bmp", "svg"}),
    "video": frozenset({"mp4", "mov", "avi", "mkv", "webm", "flv", "wmv", "m4v"}),
    "audio": frozenset({"mp3", "wav", "ogg", "flac", "aac", "m4a", "wma", "opus"}),
    "pdf": frozenset({"pdf"}),
    "document": frozenset({"doc", "docx", "txt", "rtf", "odt", "md"}),
    "spreadsheet": frozenset({"xls", "xlsx", "csv", "ods"}),
    "presentation": frozenset({"ppt", "pptx", "odp", "key"}),
    "archive": frozenset({"zip", "rar", "7z", "tar", "gz", "bz2", "xz"}),
}


def media_type(content_type: Optional[str]) -> str:
    """Lowercased media type without parameters such as "; charset=utf-8"."""
    if not isinstance(content_type, str):
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def _by_content_type(ct: str) -> str:
    for matches, category in CONTENT_TYPE_RULES:
        if matches(ct):
            return category
    return "other"


def file_extension(name: Optional[str]) -> str:
    """Lowercased text after the last dot, or "" when there is none."""
    if not name or "." not in name:
        return ""
    return name.rsplit(".", 1)[1].strip().lower()


def _by_extension(name: Optional[str]) -> str:
    ext = file_extension(name)
    if not ext:
        return "other"
    for category, extensions in EXTENSION_CATEGORIES.items():
        if ext in extensions:
            return category
    return "other"


def categorize(content_type: Optional[str], name: Optional[str]) -> str:
    """Classify a file into one of CATEGORIES.

    The declared content-type wins whenever it is present and names a media type;
    the file name's extension is only consulted without one.
    """
    ct = media_type(content_type)
    if ct:
        return _by_content_type(ct)
    if not isinstance(name, str):
        return "other"
    return _by_extension(name)
