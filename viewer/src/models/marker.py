"""Marker model - a property pinned to the map."""
from dataclasses import dataclass, field
import uuid

from models.transform import ContentPoint
from constants import MARKER_COLORS, MARKER_COLOR_DEFAULT, MARKER_COLOR_SELECTED


@dataclass
class Marker:
    """A catalog entry placed on the map.

    Only ``id`` and ``position`` matter to the viewport engine. The remaining
    fields belong to the catalog and are used for tooltips and coloring.
    """
    id: str
    position: ContentPoint
    name: str = ''
    kind: str = ''  # 'Villa', 'Apartment', 'Plot', 'Commercial'
    listing_type: str = ''  # 'Buy', 'Rent', 'Lease'
    price: str = ''
    sector: str = ''
    size: str = ''  # e.g. '250 sq.m'
    area: str = ''  # e.g. '2691 sq.ft'
    extra: dict = field(default_factory=dict)

    @classmethod
    def create(cls, position, **fields):
        """Create a marker with a freshly generated id."""
        return cls(id=str(uuid.uuid4()), position=position, **fields)

    @classmethod
    def from_dict(cls, data):
        """Build a marker from a plain dict such as a JSON catalog entry.

        Coordinates may be given as ``{'coordinates': {'x': .., 'y': ..}}`` or
        as flat ``x``/``y`` keys. Keys that are not Marker fields end up in
        ``extra``.

        Raises:
            KeyError: If no coordinates are present
        """
        data = dict(data)
        # camelCase keys used by the web catalog export
        for alias, name in (('type', 'kind'), ('listingType', 'listing_type')):
            if alias in data:
                data.setdefault(name, data.pop(alias))
        coords = data.pop('coordinates', None)
        if coords is None:
            coords = {'x': data.pop('x'), 'y': data.pop('y')}
        known = {'id', 'name', 'kind', 'listing_type', 'price', 'sector', 'size', 'area'}
        fields_ = {k: data.pop(k) for k in list(data) if k in known}
        # null in the catalog means the field is blank
        fields_ = {k: ('' if v is None else str(v)) for k, v in fields_.items()}
        if not fields_.get('id'):
            fields_.pop('id', None)
        fields_.setdefault('id', str(uuid.uuid4()))
        return cls(
            position=ContentPoint(float(coords['x']), float(coords['y'])),
            extra=data,
            **fields_
        )

    def tooltip_text(self):
        lines = [self.name or self.id]
        if self.price:
            lines.append(self.price)
        if self.listing_type:
            lines.append(self.listing_type)
        return '\n'.join(lines)


def marker_color(marker, selected=False):
    """Hex fill color for a marker based on its property type."""
    if selected:
        return MARKER_COLOR_SELECTED
    return MARKER_COLORS.get((marker.kind or '').lower(), MARKER_COLOR_DEFAULT)
