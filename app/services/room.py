from typing import Any

from app.mappers.record_merger import replace_record
from app.schemas.room import ROOM_RULES, Room
from app.services.resource import ResourceService


class RoomService(ResourceService):
    label = "Room"
    table = "Room"
    id_column = "RoomID"
    fields = ("RoomNumber", "Type", "Price", "Status")
    model = Room
    create_rules = ROOM_RULES
    update_rules = ROOM_RULES

    def _updated_values(
        self, current: dict[str, Any], payload: dict[str, Any]
    ) -> dict[str, Any]:
        # Full replace; the stored row only served as the existence check.
        return replace_record(payload, self.fields)
