# vendor_api/utils/sanitize.py
import os


def sanitize_filename(filename: str) -> str:
    """Strip path components and reject dangerous filenames.

    Returns the basename of the provided filename, raising ValueError
    if the result is empty, a relative path marker, or hidden.
    """
    basename = os.path.basename(filename.replace("\\", "/"))
    if basename in ("", ".", "..") or basename.startswith("."):
        raise ValueError("Invalid filename")
    return basename
