from pydantic import BaseModel

from app.mappers.payload_validator import (
    FieldKind,
    FieldRule,
    max_value,
    min_length,
    min_value,
    optional,
)


class Hotel(BaseModel):
    HotelID: int
    name: str
    location: str
    rating: float
    contact: str


class HotelResponse(BaseModel):
    message: str
    data: Hotel


class HotelListResponse(BaseModel):
    message: str
    data: list[Hotel]


HOTEL_CREATE_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        field="name",
        kind=FieldKind.string,
        checks=(min_length(3, "Hotel name must be at least 3 characters"),),
    ),
    FieldRule(
        field="location",
        kind=FieldKind.string,
        checks=(min_length(3, "Location must be at least 3 characters"),),
    ),
    FieldRule(
        field="rating",
        kind=FieldKind.number,
        checks=(
            min_value(0, "Rating must be at least 0"),
            max_value(5, "Rating must be at most 5"),
        ),
    ),
    FieldRule(
        field="contact",
        kind=FieldKind.string,
        checks=(min_length(5, "Contact must be at least 5 characters"),),
    ),
)

# PUT merges into the stored row, so every field may be omitted
HOTEL_UPDATE_RULES = optional(HOTEL_CREATE_RULES)
