# app/routers/gallery.py
import uuid

from fastapi import Depends, File, Form, UploadFile, status
from sqlmodel import Session

from app.core.auth import get_current_user
from app.database import get_session
from app.models.showcase import GalleryItem
from app.models.user import User
from app.repositories.owned_repo import OwnedRepository
from app.routers.resource_router import build_owned_router
from app.schemas.common import ApiResponse, ok
from app.schemas.showcase import GalleryFields, GalleryRead, GalleryUpdate
from app.services.resource_service import OwnedResourceService

repo = OwnedRepository(GalleryItem)
service = OwnedResourceService(
    repo,
    label="Gallery item",
    blob_fields={"image_url": "gallery"},
)

router = build_owned_router(
    prefix="/gallery",
    tags=["Gallery"],
    service=service,
    read_model=GalleryRead,
    update_model=GalleryUpdate,
    image_field="image_url",
)


@router.post(
    "",
    response_model=ApiResponse[GalleryRead],
    status_code=status.HTTP_201_CREATED,
)
def upload_gallery_image(
    image: UploadFile = File(...),
    caption: str | None = Form(default=None),
    user_id: uuid.UUID | None = Form(default=None),
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Upload an image to the caller's gallery (multipart).

    - Admins may pass `user_id` to add to another account's gallery.
    """
    fields = GalleryFields(caption=caption, user_id=user_id)
    item = service.create(
        session,
        current_user,
        fields,
        blob=("image_url", image.content_type, image.file.read()),
    )
    return ok(item, "Image uploaded successfully")
