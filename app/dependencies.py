from typing import Annotated

from fastapi import Depends, Request

from app.services.hotel import HotelService
from app.services.room import RoomService


def get_hotel_service(request: Request) -> HotelService:
    return request.app.state.hotel_service


def get_room_service(request: Request) -> RoomService:
    return request.app.state.room_service


HotelServiceDep = Annotated[HotelService, Depends(get_hotel_service)]
RoomServiceDep = Annotated[RoomService, Depends(get_room_service)]
