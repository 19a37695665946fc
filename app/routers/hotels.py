from typing import Annotated, Any

from fastapi import APIRouter, Body

from app.dependencies import HotelServiceDep
from app.schemas.hotel import HotelListResponse, HotelResponse

router = APIRouter(prefix="/api/hotels", tags=["hotels"])

JsonBody = Annotated[dict[str, Any], Body()]


@router.get("", response_model=HotelListResponse)
async def list_hotels(service: HotelServiceDep) -> HotelListResponse:
    return HotelListResponse(message="All hotels", data=await service.list_all())


@router.get("/{hotel_id}", response_model=HotelResponse)
async def get_hotel(hotel_id: str, service: HotelServiceDep) -> HotelResponse:
    hotel = await service.get(hotel_id)
    return HotelResponse(message=f"Hotel ID: {hotel_id}", data=hotel)


@router.post("", response_model=HotelResponse, status_code=201)
async def create_hotel(payload: JsonBody, service: HotelServiceDep) -> HotelResponse:
    hotel = await service.create(payload)
    return HotelResponse(message="Hotel created", data=hotel)


@router.put("/{hotel_id}", response_model=HotelResponse)
async def update_hotel(
    hotel_id: str, payload: JsonBody, service: HotelServiceDep
) -> HotelResponse:
    hotel = await service.update(hotel_id, payload)
    return HotelResponse(message="Hotel updated successfully", data=hotel)


@router.delete("/{hotel_id}", response_model=HotelResponse)
async def delete_hotel(hotel_id: str, service: HotelServiceDep) -> HotelResponse:
    hotel = await service.delete(hotel_id)
    return HotelResponse(message="Hotel deleted successfully", data=hotel)
