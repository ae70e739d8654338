"""The fixed room map and its debug dump."""

from quest.world.exporters import dump_map
from quest.world.room_map import Room, RoomMap

__all__ = [
    "dump_map",
    "Room",
    "RoomMap",
]
