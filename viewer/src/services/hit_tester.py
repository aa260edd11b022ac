"""Marker hit testing in content space.

The radius is in reference frame units, so the click tolerance covers the
same patch of map at every zoom level.
"""
import numpy as np

from constants import HIT_RADIUS


def marker_distances(content_point, markers):
    """Euclidean distance from content_point to each marker, in collection order.

    Returns:
        numpy array of distances (empty if there are no markers)
    """
    if not markers:
        return np.empty(0)
    positions = np.array([(m.position.x, m.position.y) for m in markers], dtype=float)
    return np.hypot(positions[:, 0] - content_point.x, positions[:, 1] - content_point.y)


def find_nearest(content_point, markers, radius=HIT_RADIUS):
    """Find the marker closest to content_point, if it is within radius.

    Args:
        content_point: ContentPoint that was clicked
        markers: Ordered sequence of Marker
        radius: Hit tolerance in content units (exclusive)

    Returns:
        Marker, or None if no marker is strictly closer than radius.
        Equidistant markers resolve to the earliest in the sequence.
    """
    markers = list(markers)
    distances = marker_distances(content_point, markers)
    if distances.size == 0:
        return None

    index = int(np.argmin(distances))
    if distances[index] < radius:
        return markers[index]
    return None
