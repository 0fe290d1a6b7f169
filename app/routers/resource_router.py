# app/routers/resource_router.py
"""
Router factory for owner-scoped resources.

Every resource gets the same surface (paths relative to its prefix):

    POST   ""                         create for the caller (JSON resources)
    GET    /my                        caller's items
    GET    /public/{user_id}          anonymous read of one owner's items
    GET    ""                         admin: every item
    GET    /user/{user_id}            admin: one owner's items
    DELETE /user/{user_id}/all        admin: purge one owner's items (optional)
    GET|PUT|DELETE /{item_id}/admin   admin mirror
    GET|PUT|DELETE /{item_id}         owner-scoped
    POST   /{item_id}/image           replace the item's image (optional)

Static paths are registered before /{item_id} so they are matched first.
Multipart create endpoints are added by the resource module itself.
"""

import uuid

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlmodel import Session, SQLModel

from app.core.auth import get_current_user, require_admin
from app.database import get_session
from app.models.user import User
from app.schemas.common import ApiResponse, DeletedCount, MessageResponse, ok
from app.services.resource_service import OwnedResourceService


def build_owned_router(
    *,
    prefix: str,
    tags: list[str],
    service: OwnedResourceService,
    read_model: type[SQLModel],
    update_model: type[SQLModel],
    create_model: type[SQLModel] | None = None,
    public: bool = True,
    image_field: str | None = None,
    bulk_delete: bool = False,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=tags)
    label = service.label

    if create_model is not None:

        @router.post(
            "",
            response_model=ApiResponse[read_model],
            status_code=status.HTTP_201_CREATED,
        )
        def create_item(
            payload: create_model,
            session: Session = Depends(get_session),
            current_user: User = Depends(get_current_user),
        ):
            item = service.create(session, current_user, payload)
            return ok(item, f"{label} created successfully")

    @router.get("/my", response_model=ApiResponse[list[read_model]])
    def list_my_items(
        session: Session = Depends(get_session),
        current_user: User = Depends(get_current_user),
    ):
        return ok(service.list_mine(session, current_user))

    if public:

        @router.get("/public/{user_id}", response_model=ApiResponse[list[read_model]])
        def list_public_items(
            user_id: uuid.UUID,
            session: Session = Depends(get_session),
        ):
            """No authentication required."""
            return ok(service.list_public(session, user_id))

    # -------- Admin endpoints --------

    @router.get(
        "",
        response_model=ApiResponse[list[read_model]],
        dependencies=[Depends(require_admin)],
    )
    def list_all_items(
        session: Session = Depends(get_session),
        skip: int = 0,
        limit: int = 50,
    ):
        return ok(service.list_all(session, skip=skip, limit=limit))

    @router.get(
        "/user/{user_id}",
        response_model=ApiResponse[list[read_model]],
        dependencies=[Depends(require_admin)],
    )
    def list_items_for_user(
        user_id: uuid.UUID,
        session: Session = Depends(get_session),
    ):
        return ok(service.list_for_owner(session, user_id))

    if bulk_delete:

        @router.delete(
            "/user/{user_id}/all",
            response_model=ApiResponse[DeletedCount],
            dependencies=[Depends(require_admin)],
        )
        def delete_items_for_user(
            user_id: uuid.UUID,
            session: Session = Depends(get_session),
        ):
            count = service.delete_all_for_owner(session, user_id)
            return ok({"deleted": count}, f"Deleted {count} {label.lower()} item(s)")

    @router.get(
        "/{item_id}/admin",
        response_model=ApiResponse[read_model],
        dependencies=[Depends(require_admin)],
    )
    def admin_get_item(
        item_id: uuid.UUID,
        session: Session = Depends(get_session),
    ):
        return ok(service.get_any(session, item_id))

    @router.put(
        "/{item_id}/admin",
        response_model=ApiResponse[read_model],
        dependencies=[Depends(require_admin)],
    )
    def admin_update_item(
        item_id: uuid.UUID,
        payload: update_model,
        session: Session = Depends(get_session),
    ):
        return ok(service.update_any(session, item_id, payload), f"{label} updated successfully")

    @router.delete(
        "/{item_id}/admin",
        response_model=MessageResponse,
        dependencies=[Depends(require_admin)],
    )
    def admin_delete_item(
        item_id: uuid.UUID,
        session: Session = Depends(get_session),
    ):
        service.delete_any(session, item_id)
        return {"message": f"{label} deleted successfully"}

    # -------- Owner endpoints --------

    @router.get("/{item_id}", response_model=ApiResponse[read_model])
    def get_my_item(
        item_id: uuid.UUID,
        session: Session = Depends(get_session),
        current_user: User = Depends(get_current_user),
    ):
        return ok(service.get_mine(session, current_user, item_id))

    @router.put("/{item_id}", response_model=ApiResponse[read_model])
    def update_my_item(
        item_id: uuid.UUID,
        payload: update_model,
        session: Session = Depends(get_session),
        current_user: User = Depends(get_current_user),
    ):
        item = service.update_mine(session, current_user, item_id, payload)
        return ok(item, f"{label} updated successfully")

    @router.delete("/{item_id}", response_model=MessageResponse)
    def delete_my_item(
        item_id: uuid.UUID,
        session: Session = Depends(get_session),
        current_user: User = Depends(get_current_user),
    ):
        service.delete_mine(session, current_user, item_id)
        return {"message": f"{label} deleted successfully"}

    if image_field is not None:

        @router.post("/{item_id}/image", response_model=ApiResponse[read_model])
        def upload_item_image(
            item_id: uuid.UUID,
            file: UploadFile = File(...),
            session: Session = Depends(get_session),
            current_user: User = Depends(get_current_user),
        ):
            """
            Upload or replace the item's image.

            The previous file is removed from Storage once the new URL is saved.
            """
            item = service.upload_mine(
                session,
                current_user,
                item_id,
                image_field,
                file.content_type,
                file.file.read(),
            )
            return ok(item, "Image uploaded successfully")

    return router
