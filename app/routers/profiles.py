# app/routers/profiles.py
"""
Business cards (/profile, client accounts) and student cards
(/student-profile). Both have one row per account; admin routes address
a card by its owner's user id.
"""

import uuid

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlmodel import Session, SQLModel

from app.core.auth import get_current_user, require_admin
from app.database import get_session
from app.models.profile import Profile, StudentProfile
from app.models.user import ROLE_STUDENT, User
from app.repositories.owned_repo import OwnedRepository
from app.repositories.stats_repo import StatsRepository
from app.schemas.common import ApiResponse, MessageResponse, ok
from app.schemas.profile import (
    ProfileCreate,
    ProfilePublic,
    ProfileRead,
    ProfileUpdate,
    StudentProfileCreate,
    StudentProfilePublic,
    StudentProfileRead,
    StudentProfileUpdate,
)
from app.schemas.stats import DashboardStats
from app.services.profile_service import ProfileService
from app.services.stats_service import StatsService

profile_service = ProfileService(
    OwnedRepository(Profile),
    label="Profile",
    blob_fields={"profile_img": "profiles", "banner_img": "banners"},
)
student_profile_service = ProfileService(
    OwnedRepository(StudentProfile),
    label="Student profile",
    owner_role=ROLE_STUDENT,
    blob_fields={"profile_pic": "student-profiles", "banner_pic": "student-banners"},
)
stats_service = StatsService(StatsRepository())


def _register_profile_routes(
    router: APIRouter,
    service: ProfileService,
    create_model: type[SQLModel],
    update_model: type[SQLModel],
    read_model: type[SQLModel],
    public_model: type[SQLModel],
    uploads: dict[str, tuple[str, str]],
) -> None:
    """
    Attach the shared card surface to `router`.

    `uploads` maps an upload path segment to (model field, form field name),
    e.g. {"profile-image": ("profile_img", "profileImg")}.
    """
    label = service.label

    @router.post(
        "",
        response_model=ApiResponse[read_model],
        status_code=status.HTTP_201_CREATED,
    )
    def create_profile(
        payload: create_model,
        session: Session = Depends(get_session),
        current_user: User = Depends(get_current_user),
    ):
        """400 ProfileExists if the caller already has one."""
        return ok(service.create(session, current_user, payload), f"{label} created successfully")

    for segment, (field, form_name) in uploads.items():
        _register_upload_route(router, service, read_model, segment, field, form_name)

    @router.get("/me", response_model=ApiResponse[read_model])
    def get_my_profile(
        session: Session = Depends(get_session),
        current_user: User = Depends(get_current_user),
    ):
        return ok(service.get_my(session, current_user))

    @router.put("/me", response_model=ApiResponse[read_model])
    def update_my_profile(
        payload: update_model,
        session: Session = Depends(get_session),
        current_user: User = Depends(get_current_user),
    ):
        return ok(service.update_my(session, current_user, payload), f"{label} updated successfully")

    @router.delete("/me", response_model=MessageResponse)
    def delete_my_profile(
        session: Session = Depends(get_session),
        current_user: User = Depends(get_current_user),
    ):
        """Also removes the card's images from Storage."""
        service.delete_my(session, current_user)
        return {"message": f"{label} deleted successfully"}

    @router.get("/public/{user_id}", response_model=ApiResponse[public_model])
    def get_public_profile(
        user_id: uuid.UUID,
        session: Session = Depends(get_session),
    ):
        """
        Anonymous card view (no authentication required).

        Phones, date of birth and the account email are not exposed.
        """
        return ok(service.get_public(session, user_id))

    # -------- Admin endpoints --------

    @router.get(
        "",
        response_model=ApiResponse[list[read_model]],
        dependencies=[Depends(require_admin)],
    )
    def list_profiles(
        session: Session = Depends(get_session),
        skip: int = 0,
        limit: int = 50,
    ):
        return ok(service.list_all(session, skip=skip, limit=limit))

    @router.get(
        "/{user_id}",
        response_model=ApiResponse[read_model],
        dependencies=[Depends(require_admin)],
    )
    def get_profile_for_user(
        user_id: uuid.UUID,
        session: Session = Depends(get_session),
    ):
        return ok(service.get_public(session, user_id))

    @router.put(
        "/{user_id}",
        response_model=ApiResponse[read_model],
        dependencies=[Depends(require_admin)],
    )
    def update_profile_for_user(
        user_id: uuid.UUID,
        payload: update_model,
        session: Session = Depends(get_session),
    ):
        profile = service.update_for_user(session, user_id, payload)
        return ok(profile, f"{label} updated successfully")

    @router.delete(
        "/{user_id}",
        response_model=MessageResponse,
        dependencies=[Depends(require_admin)],
    )
    def delete_profile_for_user(
        user_id: uuid.UUID,
        session: Session = Depends(get_session),
    ):
        service.delete_for_user(session, user_id)
        return {"message": f"{label} deleted successfully"}


def _register_upload_route(
    router: APIRouter,
    service: ProfileService,
    read_model: type[SQLModel],
    segment: str,
    field: str,
    form_name: str,
) -> None:
    def upload_image(
        file: UploadFile = File(..., alias=form_name),
        session: Session = Depends(get_session),
        current_user: User = Depends(get_current_user),
    ):
        """
        Upload or replace a card image (multipart).

        The previous file is removed from Storage once the new URL is saved.
        """
        profile = service.upload_my(
            session,
            current_user,
            field,
            file.content_type,
            file.file.read(),
        )
        return ok(profile, "Image uploaded successfully")

    # POST and PUT both upload-or-replace
    for method in ("POST", "PUT"):
        router.add_api_route(
            f"/upload/{segment}",
            upload_image,
            methods=[method],
            response_model=ApiResponse[read_model],
            name=f"upload_{field}_{method.lower()}",
        )


# -------- /profile --------

router = APIRouter(prefix="/profile", tags=["Profile"])


# Registered before /{user_id}
@router.get(
    "/dashboard-stats",
    response_model=ApiResponse[DashboardStats],
    dependencies=[Depends(require_admin)],
)
def get_dashboard_stats(session: Session = Depends(get_session)):
    """
    Aggregated statistics for the admin dashboard.

    Only accessible to users with role='admin'.
    """
    return ok(stats_service.get_dashboard_stats(session))


_register_profile_routes(
    router,
    profile_service,
    create_model=ProfileCreate,
    update_model=ProfileUpdate,
    read_model=ProfileRead,
    public_model=ProfilePublic,
    uploads={
        "profile-image": ("profile_img", "profileImg"),
        "banner-image": ("banner_img", "bannerImg"),
    },
)


# -------- /student-profile --------

student_router = APIRouter(prefix="/student-profile", tags=["Student Profile"])

_register_profile_routes(
    student_router,
    student_profile_service,
    create_model=StudentProfileCreate,
    update_model=StudentProfileUpdate,
    read_model=StudentProfileRead,
    public_model=StudentProfilePublic,
    uploads={
        "profile-pic": ("profile_pic", "profilePic"),
        "banner-pic": ("banner_pic", "bannerPic"),
    },
)
