from pydantic import BaseModel

from app.mappers.payload_validator import FieldKind, FieldRule, min_length, positive


class Room(BaseModel):
    RoomID: int
    RoomNumber: str
    Type: str
    Price: float
    Status: str


class RoomResponse(BaseModel):
    message: str
    data: Room


class RoomListResponse(BaseModel):
    message: str
    data: list[Room]


# Used for both POST and PUT: a room update replaces the whole record.
ROOM_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        field="RoomNumber",
        kind=FieldKind.string,
        checks=(min_length(1, "Room number must not be empty"),),
    ),
    FieldRule(
        field="Type",
        kind=FieldKind.string,
        checks=(min_length(1, "Room type must not be empty"),),
    ),
    FieldRule(
        field="Price",
        kind=FieldKind.number,
        checks=(positive("Price must be greater than 0"),),
    ),
    FieldRule(
        field="Status",
        kind=FieldKind.string,
        checks=(min_length(1, "Room status must not be empty"),),
    ),
)
