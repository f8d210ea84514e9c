import logging
import math
from typing import List, Optional

from app.db import get_db
from app.repositories.product_repo import ProductRepository
from app.schemas.product_schema import ErrorOut, MessageOut, ProductIn, ProductOut
from fastapi import APIRouter, Body, Depends, Path
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

log = logging.getLogger("app.products")

router = APIRouter(prefix="/products", tags=["products"])

STORE_ERROR = {500: {"model": ErrorOut, "description": "Internal server error"}}
NOT_FOUND = {404: {"model": MessageOut, "description": "Product not found"}}

# ids outside a signed 64-bit column can never match a row
_MAX_ID = 2**63 - 1


def coerce_id(raw: str) -> Optional[int]:
    """
    Turn a path segment into a product id the way a numeric cast would.

    Blank text is 0 and 0x, 0o and 0b prefixes are honoured. Returns None
    for anything that is not a finite integral number; such an id matches
    no row.
    """
    text = raw.strip()
    if text == "":
        return 0
    if "_" in text:
        return None
    if text[:2].lower() in ("0x", "0o", "0b"):
        try:
            value = int(text, 0)
        except ValueError:
            return None
        return value if value <= _MAX_ID else None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or not value.is_integer():
        return None
    value = int(value)
    if abs(value) > _MAX_ID:
        return None
    return value


def _store_error(db: Session, message: str, exc: SQLAlchemyError) -> JSONResponse:
    log.error("%s %s", message, exc, exc_info=exc)
    db.rollback()
    orig = getattr(exc, "orig", None)
    return JSONResponse(
        status_code=500,
        content={
            "message": message,
            "error": {
                "type": type(orig or exc).__name__,
                "code": exc.code,
                "detail": str(orig or exc),
            },
        },
    )


def _to_dict(p):
    return ProductOut.model_validate(p).model_dump()


def _fields(payload: Optional[ProductIn]):
    # no body behaves like an empty object
    return payload.model_dump() if payload is not None else {}


@router.get(
    "",
    summary="Get all products",
    response_model=List[ProductOut],
    responses=STORE_ERROR,
)
def list_products(db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    try:
        items = repo.list()
    except SQLAlchemyError as e:
        return _store_error(db, "Error occurred while retrieving products.", e)
    return [_to_dict(p) for p in items]


@router.get(
    "/{product_id}",
    summary="Get product by ID",
    response_model=List[ProductOut],
    responses={**NOT_FOUND, **STORE_ERROR},
)
def get_product(
    product_id: str = Path(..., description="Numeric product id"),
    db: Session = Depends(get_db),
):
    pid = coerce_id(product_id)
    if pid is None:
        return JSONResponse(status_code=404, content={"message": "Product not found."})
    repo = ProductRepository(db)
    try:
        rows = repo.get_by_id(pid)
    except SQLAlchemyError as e:
        return _store_error(db, "Error occurred while retrieving products.", e)
    if not rows:
        return JSONResponse(status_code=404, content={"message": "Product not found."})
    # a list even though ids are unique; existing clients index into it
    return [_to_dict(p) for p in rows]


@router.post(
    "",
    summary="Add a new product",
    status_code=201,
    response_model=MessageOut,
    responses=STORE_ERROR,
)
def create_product(
    payload: Optional[ProductIn] = Body(None),
    db: Session = Depends(get_db),
):
    repo = ProductRepository(db)
    try:
        new_id = repo.create(_fields(payload))
    except SQLAlchemyError as e:
        return _store_error(db, "Error occurred while inserting product.", e)
    log.info("Inserted product id=%s", new_id)
    return {"message": "Product inserted successfully."}


@router.put(
    "/{product_id}",
    summary="Update product",
    status_code=201,
    response_model=MessageOut,
    responses=STORE_ERROR,
)
def update_product(
    payload: Optional[ProductIn] = Body(None),
    product_id: str = Path(..., description="Numeric product id"),
    db: Session = Depends(get_db),
):
    # success is reported whether or not a row matched
    pid = coerce_id(product_id)
    if pid is not None:
        repo = ProductRepository(db)
        try:
            repo.update(pid, _fields(payload))
        except SQLAlchemyError as e:
            return _store_error(db, "Error occurred while updating product.", e)
    return {"message": "Product updated successfully."}


@router.delete(
    "/{product_id}",
    summary="Delete product by ID",
    response_model=MessageOut,
    responses=STORE_ERROR,
)
def delete_product(
    product_id: str = Path(..., description="Numeric product id"),
    db: Session = Depends(get_db),
):
    pid = coerce_id(product_id)
    if pid is not None:
        repo = ProductRepository(db)
        try:
            repo.delete(pid)
        except SQLAlchemyError as e:
            return _store_error(db, "Error occurred while deleting product.", e)
    return {"message": "Product deleted successfully."}
