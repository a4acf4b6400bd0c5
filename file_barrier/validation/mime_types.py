"""Static extension to MIME type lookup."""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Extension (lowercase, no dot) -> canonical MIME types, most common first.
_EXTENSION_MIME_MAP = {
    # Text and data
    "txt": ("text/plain",),
    "text": ("text/plain",),
    "log": ("text/plain",),
    "md": ("text/markdown",),
    "markdown": ("text/markdown",),
    "csv": ("text/csv",),
    "tsv": ("text/tab-separated-values",),
    "rtf": ("application/rtf", "text/rtf"),
    "htm": ("text/html",),
    "html": ("text/html",),
    "css": ("text/css",),
    "js": ("text/javascript", "application/javascript"),
    "json": ("application/json",),
    "xml": ("application/xml", "text/xml"),
    "yaml": ("application/yaml", "text/yaml"),
    "yml": ("application/yaml", "text/yaml"),
    "ics": ("text/calendar",),
    "vcf": ("text/vcard",),
    # Documents
    "pdf": ("application/pdf",),
    "doc": ("application/msword",),
    "dot": ("application/msword",),
    "docx": ("application/vnd.openxmlformats-officedocument.wordprocessingml.document",),
    "docm": ("application/vnd.ms-word.document.macroEnabled.12",),
    "dotx": ("application/vnd.openxmlformats-officedocument.wordprocessingml.template",),
    "odt": ("application/vnd.oasis.opendocument.text",),
    "epub": ("application/epub+zip",),
    # Spreadsheets
    "xls": ("application/vnd.ms-excel",),
    "xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",),
    "xlsm": ("application/vnd.ms-excel.sheet.macroEnabled.12",),
    "ods": ("application/vnd.oasis.opendocument.spreadsheet",),
    # Presentations
    "ppt": ("application/vnd.ms-powerpoint",),
    "pptx": ("application/vnd.openxmlformats-officedocument.presentationml.presentation",),
    "pptm": ("application/vnd.ms-powerpoint.presentation.macroEnabled.12",),
    "odp": ("application/vnd.oasis.opendocument.presentation",),
    # Images
    "png": ("image/png",),
    "jpg": ("image/jpeg",),
    "jpeg": ("image/jpeg",),
    "jpe": ("image/jpeg",),
    "gif": ("image/gif",),
    "bmp": ("image/bmp",),
    "webp": ("image/webp",),
    "svg": ("image/svg+xml",),
    "ico": ("image/x-icon", "image/vnd.microsoft.icon"),
    "tif": ("image/tiff",),
    "tiff": ("image/tiff",),
    "heic": ("image/heic",),
    "heif": ("image/heif",),
    "avif": ("image/avif",),
    # Audio
    "mp3": ("audio/mpeg", "audio/mp3"),
    "wav": ("audio/wav", "audio/x-wav"),
    "ogg": ("audio/ogg",),
    "oga": ("audio/ogg",),
    "opus": ("audio/opus",),
    "flac": ("audio/flac",),
    "aac": ("audio/aac",),
    "wma": ("audio/x-ms-wma",),
    "mid": ("audio/midi",),
    "midi": ("audio/midi",),
    "m4a": ("audio/m4a", "audio/x-m4a", "audio/mp4"),
    "m4b": ("audio/m4b",),
    "m4p": ("audio/m4p",),
    "m4r": ("audio/x-m4r",),
    "m3u": ("audio/x-mpegurl", "audio/mpegurl"),
    "m3u8": ("application/vnd.apple.mpegurl", "audio/x-mpegurl", "audio/mpegurl"),
    # Video
    "mp4": ("video/mp4",),
    "m4v": ("video/x-m4v",),
    "mpeg": ("video/mpeg",),
    "mpg": ("video/mpeg",),
    "avi": ("video/x-msvideo", "video/avi"),
    "wmv": ("video/x-ms-wmv",),
    "webm": ("video/webm",),
    "ogv": ("video/ogg",),
    "mov": ("video/quicktime",),
    "mkv": ("video/x-matroska",),
    "flv": ("video/x-flv",),
    "3gp": ("video/3gpp",),
    # Archives
    "zip": ("application/x-zip-compressed", "application/zip"),
    "gz": ("application/gzip", "application/x-gzip"),
    "tgz": ("application/gzip", "application/x-gzip"),
    "tar": ("application/x-tar",),
    "bz2": ("application/x-bzip2",),
    "7z": ("application/x-7z-compressed",),
    "rar": ("application/vnd.rar", "application/x-rar-compressed"),
    # Executables and binaries
    "exe": ("application/x-msdownload", "application/vnd.microsoft.portable-executable"),
    "dll": ("application/x-msdownload",),
    "msi": ("application/x-msi",),
    "jar": ("application/java-archive",),
    "apk": ("application/vnd.android.package-archive",),
    "bin": ("application/octet-stream",),
    # Fonts
    "ttf": ("font/ttf",),
    "otf": ("font/otf",),
    "woff": ("font/woff",),
    "woff2": ("font/woff2",),
}

EXTENSION_MIME_MAP: Mapping[str, Tuple[str, ...]] = MappingProxyType(_EXTENSION_MIME_MAP)


def get_extension(file_name: Optional[str]) -> str:
    """
    Extract the extension of a file name.

    Args:
        file_name: Name as claimed by the client, may be None

    Returns:
        str: Text after the last dot, or "" when there is no dot
    """
    if not file_name:
        return ""
    _, dot, extension = file_name.rpartition(".")
    return extension if dot else ""


def get_mime_types(extension: Optional[str]) -> Tuple[str, ...]:
    """
    Look up the canonical MIME types for an extension.

    Args:
        extension: Extension with or without a leading dot, any case

    Returns:
        Tuple[str, ...]: Known MIME types, empty for unknown extensions
    """
    if not extension:
        return ()
    return EXTENSION_MIME_MAP.get(extension.strip().lstrip(".").lower(), ())


def get_mime_type(extension: Optional[str]) -> str:
    """Comma-joined form of get_mime_types, "" for unknown extensions."""
    return ",".join(get_mime_types(extension))
