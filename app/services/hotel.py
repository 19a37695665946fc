from typing import Any

from app.mappers.record_merger import merge_record
from app.schemas.hotel import HOTEL_CREATE_RULES, HOTEL_UPDATE_RULES, Hotel
from app.services.resource import ResourceService


class HotelService(ResourceService):
    label = "Hotel"
    table = "Hotel"
    id_column = "HotelID"
    fields = ("name", "location", "rating", "contact")
    model = Hotel
    create_rules = HOTEL_CREATE_RULES
    update_rules = HOTEL_UPDATE_RULES

    def _updated_values(
        self, current: dict[str, Any], payload: dict[str, Any]
    ) -> dict[str, Any]:
        return merge_record(current, payload, self.fields)
