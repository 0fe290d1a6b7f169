# app/routers/products.py
import uuid

from fastapi import Depends, File, Form, UploadFile, status
from sqlmodel import Session

from app.core.auth import get_current_user
from app.database import get_session
from app.models.showcase import Product
from app.models.user import User
from app.repositories.owned_repo import OwnedRepository
from app.routers.resource_router import build_owned_router
from app.schemas.common import ApiResponse, ok
from app.schemas.showcase import ProductFields, ProductRead, ProductUpdate
from app.services.resource_service import OwnedResourceService

repo = OwnedRepository(Product)
service = OwnedResourceService(
    repo,
    label="Product",
    blob_fields={"product_photo": "products"},
)

# Photo replacement: POST /products/{id}/image
router = build_owned_router(
    prefix="/products",
    tags=["Products"],
    service=service,
    read_model=ProductRead,
    update_model=ProductUpdate,
    image_field="product_photo",
)


@router.post(
    "",
    response_model=ApiResponse[ProductRead],
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_photo: UploadFile = File(...),
    product_name: str = Form(..., max_length=200),
    price: float = Form(..., ge=0),
    details: str = Form(...),
    user_id: uuid.UUID | None = Form(default=None),
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Create a product with its photo (multipart).

    - Accepts JPEG, PNG, WEBP, GIF.
    - Admins may pass `user_id` to create for another account.
    """
    fields = ProductFields(
        product_name=product_name,
        price=price,
        details=details,
        user_id=user_id,
    )
    item = service.create(
        session,
        current_user,
        fields,
        blob=("product_photo", product_photo.content_type, product_photo.file.read()),
    )
    return ok(item, "Product created successfully")
