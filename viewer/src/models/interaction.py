"""Result of a completed pointer gesture."""
from dataclasses import dataclass


@dataclass(frozen=True)
class InteractionResult:
    """What a click on the map resolved to.

    kind is one of:
    - 'select': ``marker`` was clicked
    - 'place': placement mode click at ``content_point``
    - 'none': pan gesture, aborted gesture, or click on empty map
    """
    kind: str
    marker: object = None
    content_point: object = None

    SELECT = 'select'
    PLACE = 'place'
    NONE = 'none'

    @classmethod
    def select(cls, marker):
        return cls(cls.SELECT, marker=marker, content_point=marker.position)

    @classmethod
    def place(cls, content_point):
        return cls(cls.PLACE, content_point=content_point)

    @classmethod
    def none(cls):
        return cls(cls.NONE)

    @property
    def is_none(self):
        return self.kind == self.NONE
