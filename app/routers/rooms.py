from typing import Annotated, Any

from fastapi import APIRouter, Body

from app.dependencies import RoomServiceDep
from app.schemas.room import RoomListResponse, RoomResponse

router = APIRouter(prefix="/api/room", tags=["rooms"])

JsonBody = Annotated[dict[str, Any], Body()]


@router.get("", response_model=RoomListResponse)
async def list_rooms(service: RoomServiceDep) -> RoomListResponse:
    return RoomListResponse(message="All rooms", data=await service.list_all())


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(room_id: str, service: RoomServiceDep) -> RoomResponse:
    room = await service.get(room_id)
    return RoomResponse(message=f"Room for ID: {room_id}", data=room)


@router.post("", response_model=RoomResponse, status_code=201)
async def create_room(payload: JsonBody, service: RoomServiceDep) -> RoomResponse:
    room = await service.create(payload)
    return RoomResponse(message="Room created", data=room)


@router.put("/{room_id}", response_model=RoomResponse)
async def update_room(room_id: str, payload: JsonBody, service: RoomServiceDep) -> RoomResponse:
    room = await service.update(room_id, payload)
    return RoomResponse(message="Room updated", data=room)


@router.delete("/{room_id}", response_model=RoomResponse)
async def delete_room(room_id: str, service: RoomServiceDep) -> RoomResponse:
    room = await service.delete(room_id)
    return RoomResponse(message="Room deleted", data=room)
