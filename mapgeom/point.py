# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Points, sizes, and 2D vector algebra.
A `Point` doubles as a free vector; which one it is depends on the call site.
'''

from collections.abc import Sequence
from dataclasses import dataclass
from math import hypot, isfinite
from typing import overload


__all__ = [
  'add',
  'cross_mag',
  'distance',
  'dot',
  'fmt_float',
  'mag',
  'mag_squared',
  'mult',
  'Point',
  'point_offset',
  'Size',
  'sub',
  'unit_vector',
]


def fmt_float(f:float) -> str:
  i = int(f) if isfinite(f) else None
  return str(i) if f == i else str(f)


@dataclass(frozen=True, slots=True)
class Point(Sequence[float]):
  '''
  Point is an immutable 2D point or vector with components x and y.
  Each component defaults to zero if not specified.
  '''

  x:float = 0
  y:float = 0


  def __str__(self) -> str: return f'({fmt_float(self.x)},{fmt_float(self.y)})'

  def __repr__(self) -> str: return f'Point{self}'


  # Arithmetic operations.

  def __neg__(self) -> 'Point': return Point(-self.x, -self.y)


  def __bool__(self) -> bool: return bool(self.x or self.y)


  def __add__(self, r:'Point') -> 'Point':
    if not isinstance(r, Point): return NotImplemented # type: ignore[unreachable]
    return Point(self.x + r.x, self.y + r.y)


  def __sub__(self, r:'Point') -> 'Point':
    if not isinstance(r, Point): return NotImplemented # type: ignore[unreachable]
    return Point(self.x - r.x, self.y - r.y)


  def __mul__(self, s:float) -> 'Point':
    if not isinstance(s, (int, float)): return NotImplemented # type: ignore[unreachable]
    return Point(self.x*s, self.y*s)

  __rmul__ = __mul__


  def __truediv__(self, s:float) -> 'Point':
    if not isinstance(s, (int, float)): return NotImplemented # type: ignore[unreachable]
    return Point(self.x / s, self.y / s)


  def __len__(self) -> int: return 2


  def __iter__(self):
    yield self.x
    yield self.y


  @overload
  def __getitem__(self, i:int) -> float: ...

  @overload
  def __getitem__(self, i:slice) -> tuple[float, ...]: ...

  def __getitem__(self, i):
    match i:
      case 0: return self.x
      case 1: return self.y
      case _: # Negative indices and slices.
        return (self.x, self.y)[i]


  @property
  def is_finite(self) -> bool:
    return isfinite(self.x) and isfinite(self.y)


  @property
  def mag(self) -> float: return mag(self)

  @property
  def mag2(self) -> float: return mag_squared(self)


@dataclass(frozen=True, slots=True)
class Size:
  '''
  A width and height pair.
  Negative components are allowed; they arise as intermediate results of unions and inversions.
  '''
  width:float = 0
  height:float = 0

  def __str__(self) -> str: return f'({fmt_float(self.width)}x{fmt_float(self.height)})'

  def __repr__(self) -> str: return f'Size{self}'


def add(a:Point, b:Point) -> Point:
  return Point(a.x + b.x, a.y + b.y)


def sub(a:Point, b:Point) -> Point:
  return Point(a.x - b.x, a.y - b.y)


def mult(a:Point, c:float) -> Point:
  'Scale a vector by `c`.'
  return Point(a.x*c, a.y*c)


def dot(a:Point, b:Point) -> float:
  return a.x*b.x + a.y*b.y


def mag_squared(a:Point) -> float:
  return a.x*a.x + a.y*a.y


def mag(a:Point) -> float:
  'Magnitude of the vector. `hypot` avoids intermediate overflow for large coordinates.'
  return hypot(a.x, a.y)


def unit_vector(a:Point) -> Point:
  '''
  The normalized vector.
  The caller must guarantee a nonzero magnitude; a zero vector raises ZeroDivisionError.
  '''
  d = mag(a)
  return Point(a.x / d, a.y / d)


def cross_mag(a:Point, b:Point) -> float:
  '''
  Z component of the cross product of two 2D vectors.
  Positive when `b` is counter-clockwise from `a`.
  '''
  return a.x*b.y - a.y*b.x


def distance(a:Point, b:Point) -> float:
  return mag(sub(a, b))


def point_offset(p:Point, dx:float, dy:float) -> Point:
  return Point(p.x + dx, p.y + dy)
