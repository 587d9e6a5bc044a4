# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from collections.abc import Sequence

from .point import cross_mag, distance, dot, mag_squared, Point, sub, unit_vector
from .rect import contains_point, Rect


__all__ = [
  'closest_point_on_line',
  'distance_line_to_point',
  'distance_point_to_segment',
  'intersection_of_two_vectors',
  'reduce_points',
  'segment_intersects_rect',
  'segments_intersect',
]


def closest_point_on_line(a:Point, b:Point, p:Point) -> Point:
  '''
  Project `p` onto the infinite line through `a` and `b`.
  The result is not clamped, so it can lie outside of the segment.
  '''
  ab = sub(b, a)
  mag2 = mag_squared(ab)
  if mag2 == 0: return a # Line is ill-defined, but the single point is still the closest.
  t = dot(sub(p, a), ab) / mag2
  return Point(a.x + ab.x*t, a.y + ab.y*t)


def distance_point_to_segment(p:Point, line1:Point, line2:Point) -> float:
  'Distance from `p` to the nearest point of the finite segment, including its endpoints.'
  v = sub(line2, line1)
  mag2 = mag_squared(v)
  if mag2 == 0: return distance(p, line1)
  t = dot(sub(p, line1), v) / mag2
  if t <= 0: return distance(p, line1)
  if t >= 1: return distance(p, line2)
  return distance(p, Point(line1.x + v.x*t, line1.y + v.y*t))


def distance_line_to_point(line_start:Point, line_direction:Point, p:Point) -> float:
  '''
  Distance from `p` to the infinite line through `line_start` along `line_direction`.
  The direction need not be a unit vector, but it must be nonzero.
  '''
  n = unit_vector(line_direction)
  return abs(cross_mag(n, sub(p, line_start)))


def intersection_of_two_vectors(p1:Point, v1:Point, p2:Point, v2:Point) -> Point|None:
  '''
  Intersect the lines `p1 + t*v1` and `p2 + s*v2`.
  Return None if the vectors are parallel.
  '''
  det = cross_mag(v1, v2)
  if det == 0: return None
  t = cross_mag(sub(p2, p1), v2) / det
  return Point(p1.x + v1.x*t, p1.y + v1.y*t)


def segments_intersect(a1:Point, a2:Point, b1:Point, b2:Point) -> bool:
  '''
  Test whether two finite segments meet, including touching at an endpoint.
  Collinear segments are reported as intersecting only if they overlap.
  '''
  da = sub(a2, a1)
  db = sub(b2, b1)
  # A zero-length segment is a point; it meets the other segment only if it lies on it.
  if mag_squared(da) == 0: return distance_point_to_segment(a1, b1, b2) == 0
  if mag_squared(db) == 0: return distance_point_to_segment(b1, a1, a2) == 0
  det = cross_mag(da, db)
  ab = sub(b1, a1)
  if det == 0:
    if cross_mag(ab, da) != 0: return False # Parallel but not collinear.
    # Collinear: compare the projections onto the longer direction.
    d = da if mag_squared(da) >= mag_squared(db) else db
    ta = sorted((dot(a1, d), dot(a2, d)))
    tb = sorted((dot(b1, d), dot(b2, d)))
    return ta[0] <= tb[1] and tb[0] <= ta[1]
  t = cross_mag(ab, db) / det
  s = cross_mag(ab, da) / det
  return 0 <= t <= 1 and 0 <= s <= 1


def segment_intersects_rect(p1:Point, p2:Point, rect:Rect) -> bool:
  'True if the segment crosses, touches, or lies within `rect`.'
  if contains_point(rect, p1) or contains_point(rect, p2): return True
  c0 = rect.origin
  c1 = Point(rect.max_x, rect.y)
  c2 = rect.far_corner
  c3 = Point(rect.x, rect.max_y)
  return (
    segments_intersect(p1, p2, c0, c1) or
    segments_intersect(p1, p2, c1, c2) or
    segments_intersect(p1, p2, c2, c3) or
    segments_intersect(p1, p2, c3, c0))


def reduce_points(points:Sequence[Point], epsilon:float) -> list[Point]:
  '''
  Simplify a polyline with the Douglas-Peucker algorithm.
  The endpoints are always kept; interior points within `epsilon` of the simplified line are dropped.
  '''
  if len(points) < 3: return list(points)
  keep = [False] * len(points)
  keep[0] = keep[-1] = True
  stack = [(0, len(points) - 1)]
  while stack:
    start, end = stack.pop()
    max_dist = -1.0
    max_idx = start
    for i in range(start + 1, end):
      dist = distance_point_to_segment(points[i], points[start], points[end])
      if dist > max_dist:
        max_dist = dist
        max_idx = i
    if max_dist > epsilon:
      keep[max_idx] = True
      stack.append((start, max_idx))
      stack.append((max_idx, end))
  return [p for p, k in zip(points, keep) if k]
