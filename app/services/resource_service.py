# app/services/resource_service.py
import logging
import uuid
from typing import Generic

from sqlmodel import Session, SQLModel

from app.core.auth import ensure_role
from app.core.errors import Forbidden, NotFound, StorageFailure
from app.core.storage_utils import (
    IMAGE_CONTENT_TYPES,
    delete_public_url,
    generate_object_path,
    upload_to_storage,
    validate_upload,
)
from app.models.user import ROLE_ADMIN, User
from app.repositories.owned_repo import ModelT, OwnedRepository

logger = logging.getLogger(__name__)


class OwnedResourceService(Generic[ModelT]):
    """
    Business logic shared by every owner-scoped resource.

    Responsibilities:
      - owner scoping (another owner's row is reported as NotFound)
      - optional persona check (e.g. only students touch student resources)
      - the admin mirror (same operations without the owner check)
      - blob lifecycle for URL columns backed by Supabase Storage

    Blob replacement order:
      1. upload the new object under a fresh path
      2. persist the new URL
      3. delete the previous object (best-effort)
    so a failed upload or write never leaves the row pointing at a
    deleted object.
    """

    def __init__(
        self,
        repo: OwnedRepository[ModelT],
        *,
        label: str,
        owner_role: str | None = None,
        blob_fields: dict[str, str] | None = None,
        allowed_types: dict[str, str] = IMAGE_CONTENT_TYPES,
    ):
        self.repo = repo
        self.label = label
        self.owner_role = owner_role
        # URL column -> Storage folder
        self.blob_fields = blob_fields or {}
        self.allowed_types = allowed_types

    # ----- Helpers -----

    def _not_found(self) -> NotFound:
        return NotFound(f"{self.label} not found")

    def _check_owner_role(self, owner: User, action: str) -> None:
        if self.owner_role is not None:
            ensure_role(owner, self.owner_role, action)

    def _resolve_owner_id(
        self,
        session: Session,
        owner: User,
        requested: uuid.UUID | None,
    ) -> uuid.UUID:
        """
        Admins may create on behalf of another account by passing user_id.
        """
        if requested is None or requested == owner.id:
            return owner.id
        if owner.role != ROLE_ADMIN:
            raise Forbidden("Only admins can create items for another user")
        if session.get(User, requested) is None:
            raise NotFound("User not found")
        return requested

    @staticmethod
    def _apply(item: ModelT, payload: SQLModel) -> None:
        for key, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(item, key, value)

    def _blob_urls(self, item: ModelT) -> list[str]:
        return [getattr(item, field) for field in self.blob_fields if getattr(item, field)]

    def upload_blob(
        self,
        owner_id: uuid.UUID,
        field: str,
        content_type: str | None,
        file_bytes: bytes,
    ) -> str:
        """Validate and upload a file for `field`; return its public URL."""
        if field not in self.blob_fields:
            raise ValueError(f"{self.label} has no blob field {field!r}")
        ext = validate_upload(content_type, file_bytes, self.allowed_types)
        path = generate_object_path(self.blob_fields[field], owner_id, ext)
        try:
            return upload_to_storage(path, file_bytes, content_type)
        except Exception as exc:
            logger.exception("Upload to %s failed", path)
            raise StorageFailure("Failed to upload file") from exc

    def replace_blob(
        self,
        session: Session,
        item: ModelT,
        field: str,
        content_type: str | None,
        file_bytes: bytes,
    ) -> ModelT:
        old_url = getattr(item, field)
        new_url = self.upload_blob(item.user_id, field, content_type, file_bytes)

        setattr(item, field, new_url)
        try:
            item = self.repo.update(session, item)
        except Exception:
            session.rollback()
            delete_public_url(new_url)
            raise

        if old_url and old_url != new_url:
            delete_public_url(old_url)
        return item

    # ----- Owner-scoped operations -----

    def create(
        self,
        session: Session,
        owner: User,
        payload: SQLModel,
        blob: tuple[str, str | None, bytes] | None = None,
    ) -> ModelT:
        """
        Create an item for the caller (or, for admins, for `payload.user_id`).

        `blob` is an optional (field, content_type, bytes) upload stored
        before the row is inserted.
        """
        self._check_owner_role(owner, f"create {self.label.lower()}s")

        data = payload.model_dump(exclude_none=True)
        owner_id = self._resolve_owner_id(session, owner, data.pop("user_id", None))

        if blob is not None:
            field, content_type, file_bytes = blob
            data[field] = self.upload_blob(owner_id, field, content_type, file_bytes)

        item = self.repo.model(user_id=owner_id, **data)
        try:
            return self.repo.create(session, item)
        except Exception:
            session.rollback()
            if blob is not None:
                delete_public_url(data[blob[0]])
            raise

    def list_mine(self, session: Session, owner: User) -> list[ModelT]:
        self._check_owner_role(owner, f"access their {self.label.lower()}s")
        return self.repo.list_for_owner(session, owner.id)

    def get_mine(self, session: Session, owner: User, item_id: uuid.UUID) -> ModelT:
        self._check_owner_role(owner, f"access their {self.label.lower()}s")
        item = self.repo.get_for_owner(session, item_id, owner.id)
        if item is None:
            raise self._not_found()
        return item

    def update_mine(
        self,
        session: Session,
        owner: User,
        item_id: uuid.UUID,
        payload: SQLModel,
    ) -> ModelT:
        item = self.get_mine(session, owner, item_id)
        self._apply(item, payload)
        return self.repo.update(session, item)

    def delete_mine(self, session: Session, owner: User, item_id: uuid.UUID) -> None:
        item = self.get_mine(session, owner, item_id)
        self._delete(session, item)

    def upload_mine(
        self,
        session: Session,
        owner: User,
        item_id: uuid.UUID,
        field: str,
        content_type: str | None,
        file_bytes: bytes,
    ) -> ModelT:
        item = self.get_mine(session, owner, item_id)
        return self.replace_blob(session, item, field, content_type, file_bytes)

    # ----- Public reads -----

    def list_public(self, session: Session, owner_id: uuid.UUID) -> list[ModelT]:
        return self.repo.list_for_owner(session, owner_id)

    # ----- Admin mirror -----

    def list_all(self, session: Session, skip: int = 0, limit: int = 50) -> list[ModelT]:
        return self.repo.list_all(session, skip=skip, limit=limit)

    def get_any(self, session: Session, item_id: uuid.UUID) -> ModelT:
        item = self.repo.get_by_id(session, item_id)
        if item is None:
            raise self._not_found()
        return item

    def update_any(self, session: Session, item_id: uuid.UUID, payload: SQLModel) -> ModelT:
        item = self.get_any(session, item_id)
        self._apply(item, payload)
        return self.repo.update(session, item)

    def delete_any(self, session: Session, item_id: uuid.UUID) -> None:
        item = self.get_any(session, item_id)
        self._delete(session, item)

    def list_for_owner(self, session: Session, owner_id: uuid.UUID) -> list[ModelT]:
        return self.repo.list_for_owner(session, owner_id)

    def delete_all_for_owner(self, session: Session, owner_id: uuid.UUID) -> int:
        items = self.repo.list_for_owner(session, owner_id)
        urls = [url for item in items for url in self._blob_urls(item)]
        self.repo.delete_many(session, items)
        for url in urls:
            delete_public_url(url)
        return len(items)

    # ----- Internal -----

    def _delete(self, session: Session, item: ModelT) -> None:
        """Delete the row first, then its blobs (best-effort)."""
        urls = self._blob_urls(item)
        self.repo.delete(session, item)
        for url in urls:
            delete_public_url(url)
