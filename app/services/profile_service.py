# app/services/profile_service.py
import uuid

from sqlmodel import Session, SQLModel

from app.core.errors import NotFound, ProfileExists
from app.models.user import User
from app.repositories.owned_repo import ModelT
from app.services.resource_service import OwnedResourceService


class ProfileService(OwnedResourceService[ModelT]):
    """
    One-per-owner variant of the owned resource service.

    Used for both client business cards (Profile) and student portfolio
    cards (StudentProfile); the persona is enforced through owner_role.
    """

    def get_my(self, session: Session, owner: User) -> ModelT:
        self._check_owner_role(owner, "access their profile")
        profile = self.repo.first_for_owner(session, owner.id)
        if profile is None:
            raise self._not_found()
        return profile

    def create(self, session: Session, owner: User, payload: SQLModel, blob=None) -> ModelT:
        self._check_owner_role(owner, "create a profile")
        if self.repo.first_for_owner(session, owner.id) is not None:
            raise ProfileExists()
        return super().create(session, owner, payload, blob=blob)

    def update_my(self, session: Session, owner: User, payload: SQLModel) -> ModelT:
        profile = self.get_my(session, owner)
        self._apply(profile, payload)
        return self.repo.update(session, profile)

    def delete_my(self, session: Session, owner: User) -> None:
        profile = self.get_my(session, owner)
        self._delete(session, profile)

    def upload_my(
        self,
        session: Session,
        owner: User,
        field: str,
        content_type: str | None,
        file_bytes: bytes,
    ) -> ModelT:
        """
        Upload or replace one of the profile images.

        Raises NotFound if the caller has not created a profile yet.
        """
        profile = self.get_my(session, owner)
        return self.replace_blob(session, profile, field, content_type, file_bytes)

    def get_public(self, session: Session, user_id: uuid.UUID) -> ModelT:
        profile = self.repo.first_for_owner(session, user_id)
        if profile is None:
            raise NotFound("Profile not found")
        return profile

    # ----- Admin, addressed by owner id -----

    def update_for_user(self, session: Session, user_id: uuid.UUID, payload: SQLModel) -> ModelT:
        profile = self.get_public(session, user_id)
        self._apply(profile, payload)
        return self.repo.update(session, profile)

    def delete_for_user(self, session: Session, user_id: uuid.UUID) -> None:
        profile = self.get_public(session, user_id)
        self._delete(session, profile)
