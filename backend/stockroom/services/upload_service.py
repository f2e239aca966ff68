# Overview: Persists uploaded stock images to the upload folder under time-derived names.

import os

from flask import current_app

from ..time_utils import epoch_millis


def upload_folder() -> str:
    return current_app.config["UPLOAD_FOLDER"]


def ensure_upload_folder(path: str) -> str:
    """Create the upload directory if it does not exist yet."""
    os.makedirs(path, exist_ok=True)
    return path


def extension_of(filename: str | None) -> str:
    """Original extension including the dot, or "" (path components are ignored)."""
    if not filename:
        return ""
    base = os.path.basename(filename.replace("\\", "/"))
    return os.path.splitext(base)[1]


def unique_filename(folder: str, original_name: str | None) -> str:
    """
    <epoch-ms><ext>, advanced one millisecond at a time while the name is taken.

    Unique as long as the clock does not run backwards.
    """
    ext = extension_of(original_name)
    stamp = epoch_millis()
    name = f"{stamp}{ext}"
    while os.path.exists(os.path.join(folder, name)):
        stamp += 1
        name = f"{stamp}{ext}"
    return name


def save_upload(file_storage) -> str | None:
    """
    Write an uploaded file verbatim and return its public URL path.

    Returns None when no file (or an empty file field) was submitted.
    OSError propagates to the route, which reports it as a server error.
    """
    if file_storage is None or not file_storage.filename:
        return None

    folder = upload_folder()
    filename = unique_filename(folder, file_storage.filename)
    file_storage.save(os.path.join(folder, filename))

    prefix = current_app.config.get("UPLOAD_URL_PREFIX", "/uploads")
    return f"{prefix}/{filename}"


def path_for(image_url: str) -> str:
    """Filesystem path of a stored image given its public URL path."""
    return os.path.join(upload_folder(), os.path.basename(image_url))
