import mimetypes
from pathlib import PurePath

HEIC_MIME_TYPES = frozenset({"image/heic", "image/heif"})
HEIC_EXTENSIONS = frozenset({".heic", ".heif"})
IMAGE_EXTENSIONS = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".tif", ".tiff",
}) | HEIC_EXTENSIONS


def file_extension(file_name: str) -> str:
    """Lowercased suffix of the file name, including the dot."""
    return PurePath(file_name).suffix.lower()


def is_heic(mime_type: str, file_name: str) -> bool:
    """True for HEIC/HEIF by mime type or by file name, case-insensitive."""
    return (mime_type or "").lower() in HEIC_MIME_TYPES or file_extension(file_name) in HEIC_EXTENSIONS


def is_image_like(mime_type: str, file_name: str) -> bool:
    """True for any image/* mime type or a recognized image extension."""
    if (mime_type or "").lower().startswith("image/"):
        return True
    return file_extension(file_name) in IMAGE_EXTENSIONS


def infer_mime_type(mime_type: str, file_name: str) -> str:
    """Fill in a missing mime type from the file name.

    Browsers and some file pickers report an empty type for HEIC files, which
    extraction backends reject. HEIC/HEIF is mapped explicitly; other names
    go through mimetypes.
    """
    if mime_type:
        return mime_type
    extension = file_extension(file_name)
    if extension == ".heic":
        return "image/heic"
    if extension == ".heif":
        return "image/heif"
    guessed, _ = mimetypes.guess_type(file_name)
    return guessed or ""


def jpeg_file_name(file_name: str) -> str:
    """Rewrite a .heic/.heif file name to .jpg; other names get .jpg appended."""
    path = PurePath(file_name)
    if path.suffix.lower() in HEIC_EXTENSIONS:
        return str(path.with_suffix(".jpg"))
    return f"{file_name}.jpg"
