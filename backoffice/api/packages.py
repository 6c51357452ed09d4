"""
Packages API endpoints
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from backoffice.api.common import http_error
from backoffice.models.package import Package, PackageItem
from backoffice.services.back_office import BackOfficeService, get_service
from backoffice.services.packages import computed_price

router = APIRouter()


class PackageCreate(BaseModel):
    name: str
    description: str = ""
    items: List[PackageItem] = []
    price: Optional[float] = None  # pins the sale price when given
    is_active: bool = True
    campaign_start: Optional[date] = None
    campaign_end: Optional[date] = None
    image: Optional[str] = None


class PackageItemsUpdate(BaseModel):
    items: List[PackageItem]


class PriceOverride(BaseModel):
    amount: float


class PackageResponse(Package):
    computed_price: float


def _response(package: Package) -> dict:
    return {**package.model_dump(), "computed_price": computed_price(package)}


@router.get("/", response_model=List[PackageResponse])
async def list_packages(
    active_only: bool = Query(False),
    service: BackOfficeService = Depends(get_service),
):
    return [_response(p) for p in service.list_packages(active_only=active_only)]


@router.post("/", response_model=PackageResponse, status_code=201)
async def create_package(data: PackageCreate, service: BackOfficeService = Depends(get_service)):
    try:
        package = service.create_package(
            data.name,
            items=data.items,
            description=data.description,
            price=data.price,
            is_active=data.is_active,
            campaign_start=data.campaign_start,
            campaign_end=data.campaign_end,
            image=data.image,
        )
    except ValueError as e:
        raise http_error(e)
    return _response(package)


@router.get("/{package_id}", response_model=PackageResponse)
async def get_package(package_id: str, service: BackOfficeService = Depends(get_service)):
    try:
        return _response(service.get_package(package_id))
    except ValueError:
        raise HTTPException(status_code=404, detail="Package not found")


@router.put("/{package_id}/items", response_model=PackageResponse)
async def update_package_items(
    package_id: str,
    data: PackageItemsUpdate,
    service: BackOfficeService = Depends(get_service),
):
    """Replace the item list; original price is recomputed, a pinned price is kept"""
    try:
        return _response(service.set_package_items(package_id, data.items))
    except ValueError as e:
        raise http_error(e)


@router.put("/{package_id}/price", response_model=PackageResponse)
async def override_package_price(
    package_id: str,
    data: PriceOverride,
    service: BackOfficeService = Depends(get_service),
):
    try:
        return _response(service.override_package_price(package_id, data.amount))
    except ValueError as e:
        raise http_error(e)


@router.delete("/{package_id}/price", response_model=PackageResponse)
async def reset_package_price(package_id: str, service: BackOfficeService = Depends(get_service)):
    """Go back to the price computed from the items"""
    try:
        return _response(service.reset_package_price(package_id))
    except ValueError as e:
        raise http_error(e)


@router.delete("/{package_id}")
async def delete_package(package_id: str, service: BackOfficeService = Depends(get_service)):
    try:
        service.delete_package(package_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Package not found")
    return {"message": "Package deleted"}
