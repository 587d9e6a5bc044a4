# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Axis-aligned rectangles.
'''

from dataclasses import dataclass

from .point import Point, Size


__all__ = [
  'contains_point',
  'contains_rect',
  'intersects',
  'Rect',
  'rect_offset',
  'rect_zero',
  'union',
]


@dataclass(frozen=True, slots=True)
class Rect:
  '''
  An axis-aligned box with an `origin` corner and a `size`.
  Containment treats the box as closed: points on the boundary are inside.
  '''

  origin:Point = Point()
  size:Size = Size()


  @classmethod
  def make(cls, x:float, y:float, width:float, height:float) -> 'Rect':
    return cls(Point(x, y), Size(width, height))


  @classmethod
  def from_corners(cls, a:Point, b:Point) -> 'Rect':
    'Create a rect with `a` as the origin and `b` as the far corner. The size is negative if `b` precedes `a`.'
    return cls(a, Size(b.x - a.x, b.y - a.y))


  def __repr__(self) -> str: return f'Rect({self.origin}, {self.size})'

  @property
  def x(self) -> float: return self.origin.x

  @property
  def y(self) -> float: return self.origin.y

  @property
  def width(self) -> float: return self.size.width

  @property
  def height(self) -> float: return self.size.height

  @property
  def max_x(self) -> float: return self.origin.x + self.size.width

  @property
  def max_y(self) -> float: return self.origin.y + self.size.height

  @property
  def far_corner(self) -> Point: return Point(self.max_x, self.max_y)

  @property
  def center(self) -> Point: return Point(self.origin.x + self.size.width*0.5, self.origin.y + self.size.height*0.5)


def rect_zero() -> Rect:
  return Rect()


def rect_offset(rect:Rect, dx:float, dy:float) -> Rect:
  return Rect(Point(rect.origin.x + dx, rect.origin.y + dy), rect.size)


def contains_point(rect:Rect, p:Point) -> bool:
  'Both bounds are inclusive on both axes.'
  return rect.x <= p.x <= rect.max_x and rect.y <= p.y <= rect.max_y


def intersects(a:Rect, b:Rect) -> bool:
  '''
  Test whether two rects overlap.
  Each axis is treated as half-open, in both directions, so rects that merely share an edge do not intersect.
  The result is symmetric in `a` and `b`.
  '''
  if a.x >= b.max_x or b.x >= a.max_x: return False
  if a.y >= b.max_y or b.y >= a.max_y: return False
  return True


def union(a:Rect, b:Rect) -> Rect:
  'The bounding box of both rects.'
  min_x = min(a.x, b.x)
  min_y = min(a.y, b.y)
  max_x = max(a.max_x, b.max_x)
  max_y = max(a.max_y, b.max_y)
  return Rect.make(min_x, min_y, max_x - min_x, max_y - min_y)


def contains_rect(a:Rect, b:Rect) -> bool:
  'True if every corner of `b` lies within or on the boundary of `a`.'
  return a.x <= b.x and a.y <= b.y and a.max_x >= b.max_x and a.max_y >= b.max_y
