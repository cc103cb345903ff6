from dataclasses import dataclass
from typing import Optional

from detective.errors import CaseFileError, allocate


@dataclass
class Room:
    name: str
    left: Optional["Room"] = None
    right: Optional["Room"] = None

    @property
    def is_dead_end(self):
        return self.left is None and self.right is None


def create_room(name):
    """Creates a room with no exits. Out of memory is fatal."""
    return allocate(Room, f"room '{name}'", name)


class Mansion:
    def __init__(self, root):
        """
        The MANSION GRAPH. A static binary tree of rooms, entered at the root.
        Never mutated once built.
        """
        self.root = root

    def __iter__(self):
        # Pre-order: a room before the rooms behind it.
        stack = [self.root] if self.root else []
        while stack:
            room = stack.pop()
            yield room
            if room.right:
                stack.append(room.right)
            if room.left:
                stack.append(room.left)

    def __len__(self):
        return sum(1 for _ in self)

    def find(self, name):
        for room in self:
            if room.name == name:
                return room
        return None


def build_mansion(layout):
    """
    Builds the tree from a nested mapping: {"name": ..., "left": {...}, "right": {...}}.
    Room names must be unique; that also rules out YAML aliases sharing a node.
    """
    if not isinstance(layout, dict):
        raise CaseFileError("Mansion layout must be a mapping with a 'name'.")

    seen = set()

    def _build(node_data, path):
        if not isinstance(node_data, dict) or not node_data.get('name'):
            raise CaseFileError(f"Room at '{path}' has no name.")
        name = str(node_data['name'])
        if name in seen:
            raise CaseFileError(f"Room '{name}' appears more than once in the layout.")
        seen.add(name)

        room = create_room(name)
        if node_data.get('left') is not None:
            room.left = _build(node_data['left'], f"{path}.left")
        if node_data.get('right') is not None:
            room.right = _build(node_data['right'], f"{path}.right")
        return room

    return Mansion(_build(layout, "root"))


class ClueCatalog:
    def __init__(self, clues=None):
        """Room name -> clue text. The room-to-clue lookup queried on every visit."""
        self.clues = dict(clues or {})

    def lookup_room_clue(self, name):
        """Returns the clue text for the room, or None if the room hides nothing."""
        return self.clues.get(name)
