# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Conversion between mapgeom values and host graphics types.

Host types are duck-typed: a point is anything with `x` and `y` attributes,
a rect is anything with `origin` and `size` (in the CGRect layout),
and a transform is anything with `a`, `b`, `c`, `d`, `tx` and `ty`.
Plain sequences and tuples are supported as well.
Outgoing conversions take a `factory` callable that builds the host value from numeric fields.
'''

from typing import Any, Callable, Iterable, TypeVar

from .point import Point, Size
from .rect import Rect
from .transform import Transform


_H = TypeVar('_H')

PointFactory = Callable[[float, float], _H]
RectFactory = Callable[[float, float, float, float], _H]
TransformFactory = Callable[[float, float, float, float, float, float], _H]


def _floats(seq:Iterable[Any], count:int, kind:str) -> tuple[float, ...]:
  fields = tuple(float(f) for f in seq)
  if len(fields) != count:
    raise ValueError(f'{kind} requires {count} fields; received {len(fields)}: {fields!r}')
  return fields


# Points.

def point_from_host(host:Any) -> Point:
  return Point(float(host.x), float(host.y))


def point_from_seq(seq:Iterable[Any]) -> Point:
  return Point(*_floats(seq, 2, 'point'))


def point_to_tuple(p:Point) -> tuple[float, float]:
  return (p.x, p.y)


def point_to_host(p:Point, factory:PointFactory[_H]) -> _H:
  return factory(p.x, p.y)


# Rects.

def rect_from_host(host:Any) -> Rect:
  'Convert a host rect with `origin.x`, `origin.y`, `size.width` and `size.height` fields.'
  origin = host.origin
  size = host.size
  return Rect(Point(float(origin.x), float(origin.y)), Size(float(size.width), float(size.height)))


def rect_from_seq(seq:Iterable[Any]) -> Rect:
  'Convert an (x, y, width, height) sequence.'
  return Rect.make(*_floats(seq, 4, 'rect'))


def rect_to_tuple(r:Rect) -> tuple[float, float, float, float]:
  return (r.x, r.y, r.width, r.height)


def rect_to_host(r:Rect, factory:RectFactory[_H]) -> _H:
  return factory(r.x, r.y, r.width, r.height)


# Transforms.

def transform_from_host(host:Any) -> Transform:
  return Transform(float(host.a), float(host.b), float(host.c), float(host.d), float(host.tx), float(host.ty))


def transform_from_seq(seq:Iterable[Any]) -> Transform:
  'Convert an (a, b, c, d, tx, ty) sequence.'
  return Transform(*_floats(seq, 6, 'transform'))


def transform_to_tuple(t:Transform) -> tuple[float, float, float, float, float, float]:
  return (t.a, t.b, t.c, t.d, t.tx, t.ty)


def transform_to_host(t:Transform, factory:TransformFactory[_H]) -> _H:
  return factory(t.a, t.b, t.c, t.d, t.tx, t.ty)
