# app/core/storage_utils.py
import logging
import uuid

from app.core.config import get_settings
from app.core.errors import PayloadTooLarge, UnsupportedMedia
from app.core.supabase_client import supabase_admin

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB per file

IMAGE_CONTENT_TYPES: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}

# Certificates may also be scanned PDFs
DOCUMENT_CONTENT_TYPES: dict[str, str] = {
    **IMAGE_CONTENT_TYPES,
    "application/pdf": "pdf",
}


def _bucket():
    return supabase_admin().storage.from_(get_settings().STORAGE_BUCKET)


def validate_upload(
    content_type: str | None,
    file_bytes: bytes,
    allowed: dict[str, str] = IMAGE_CONTENT_TYPES,
) -> str:
    """
    Check type and size of an uploaded file and return its extension.

    Raises:
        UnsupportedMedia(400): content type not allowed.
        PayloadTooLarge(413): file bigger than MAX_UPLOAD_BYTES.
    """
    if not content_type or content_type not in allowed:
        kinds = ", ".join(sorted(set(allowed.values())))
        raise UnsupportedMedia(f"Unsupported file type. Allowed: {kinds}.")

    if len(file_bytes) > MAX_UPLOAD_BYTES:
        raise PayloadTooLarge("File too large (max 10MB).")

    return allowed[content_type]


def upload_to_storage(path: str, file_bytes: bytes, content_type: str) -> str:
    """
    Upload raw bytes to Supabase Storage and return a public URL.

    Args:
        path: Full object path inside the bucket.
              Example: "gallery/<user_id>/<uuid>.png"
        file_bytes: File content in bytes.
        content_type: MIME type stored with the object.

    Returns:
        Public URL to the uploaded file.

    Raises:
        Any exception raised by Supabase client if upload fails.
    """
    bucket = _bucket()
    bucket.upload(path, file_bytes, {"content-type": content_type})
    return bucket.get_public_url(path)


def delete_from_storage(path: str) -> None:
    """
    Delete a file from Supabase Storage by its object path.

    Example path (relative to bucket):
        'gallery/<user_id>/<uuid>.png'
    """
    # Supabase Python client expects a list of paths.
    _bucket().remove([path])


def extract_path_from_public_url(url: str) -> str | None:
    """
    Given a public URL, extract the object path relative to the bucket.

    Example:
        https://<proj>.supabase.co/storage/v1/object/public/elite-cards/gallery/u/x.png
        -> 'gallery/u/x.png'
    """
    marker = f"/storage/v1/object/public/{get_settings().STORAGE_BUCKET}/"
    idx = url.find(marker)
    if idx == -1:
        return None
    path = url[idx + len(marker) :]
    # get_public_url may append a trailing "?" or query string
    return path.split("?", 1)[0] or None


def delete_public_url(url: str | None) -> None:
    """
    Best-effort delete of a file by its public URL.

    No-op for empty URLs or URLs outside this bucket. Failures are logged,
    never raised: a leftover object is preferable to failing a request
    whose database write already succeeded.
    """
    if not url:
        return
    path = extract_path_from_public_url(url)
    if not path:
        return
    try:
        delete_from_storage(path)
    except Exception as exc:
        logger.error("Storage cleanup failed for %s: %s", path, exc)


def generate_object_path(folder: str, owner_id: uuid.UUID, ext: str) -> str:
    """
    Build a fresh object path.

    Every upload gets a new UUID filename, so a replacement never
    overwrites the object still referenced by the database row.

    Returns:
        A path like "<folder>/<owner_id>/<uuid4>.png"
    """
    return f"{folder}/{owner_id}/{uuid.uuid4()}.{ext}"
