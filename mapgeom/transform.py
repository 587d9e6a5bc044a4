# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
2D affine transforms.

A `Transform` holds the six coefficients of the matrix:
  |  a   b   0  |
  |  c   d   0  |
  | tx  ty   1  |
which is applied to the row vector [x y 1]:
  x' = x*a + y*c + tx
  y' = x*b + y*d + ty

All operations return new values.
'''

from dataclasses import astuple, dataclass
from math import atan2, cos, hypot, isfinite, sin
from struct import Struct

from .point import fmt_float, Point
from .rect import Rect


__all__ = [
  'apply_point',
  'apply_rect',
  'compose',
  'concat',
  'identity',
  'invert',
  'make_translation',
  'rotate',
  'rotation',
  'scale',
  'scale_x',
  'Transform',
  'translate',
  'translation_x',
]


_coefficients_struct = Struct('<6d')
_setattr = object.__setattr__

singular_rel_tol = 1e-12 # `invert` rejects determinants this small relative to the matrix products.


@dataclass(frozen=True, slots=True, eq=False)
class Transform:
  '''
  An immutable affine transform.
  Equality is exact: two transforms are equal only if all six coefficients are bit-identical.
  '''

  a:float = 1
  b:float = 0
  c:float = 0
  d:float = 1
  tx:float = 0
  ty:float = 0


  def __post_init__(self) -> None:
    # Always floats: negating an int zero yields +0.0 where a float zero yields -0.0.
    for name in ('a', 'b', 'c', 'd', 'tx', 'ty'):
      _setattr(self, name, float(getattr(self, name)))


  def __repr__(self) -> str:
    return f'Transform({", ".join(fmt_float(f) for f in astuple(self))})'


  def __eq__(self, r:object) -> bool:
    if not isinstance(r, Transform): return NotImplemented
    return self._bits() == r._bits()


  def __hash__(self) -> int: return hash(self._bits())


  def _bits(self) -> bytes:
    return _coefficients_struct.pack(self.a, self.b, self.c, self.d, self.tx, self.ty)


  @property
  def det(self) -> float:
    'Determinant of the linear part.'
    return self.a*self.d - self.b*self.c


  @property
  def is_finite(self) -> bool:
    return all(isfinite(f) for f in astuple(self))


def identity() -> Transform:
  return Transform(1, 0, 0, 1, 0, 0)


def make_translation(dx:float, dy:float) -> Transform:
  return Transform(1, 0, 0, 1, dx, dy)


def translate(t:Transform, dx:float, dy:float) -> Transform:
  '''
  Add (dx, dy) to the translation coefficients.
  This is not a matrix multiply: the offset is added in the output coordinate space,
  regardless of any scale or rotation already in `t`.
  '''
  return Transform(t.a, t.b, t.c, t.d, t.tx + dx, t.ty + dy)


def scale(t:Transform, s:float) -> Transform:
  '''
  Multiply all six coefficients by `s`, including the translation.
  This scales the transform as a whole, so the result equals `concat(t, <uniform scale by s>)`:
  geometry is first mapped by `t`, then the output is scaled about the origin.
  '''
  return Transform(t.a*s, t.b*s, t.c*s, t.d*s, t.tx*s, t.ty*s)


def concat(a:Transform, b:Transform) -> Transform:
  '''
  Compose two transforms: the result applies `a` first, then `b`.
  apply_point(concat(a, b), p) == apply_point(b, apply_point(a, p)).
  '''
  return Transform(
    a=a.a*b.a + a.b*b.c,
    b=a.a*b.b + a.b*b.d,
    c=a.c*b.a + a.d*b.c,
    d=a.c*b.b + a.d*b.d,
    tx=a.tx*b.a + a.ty*b.c + b.tx,
    ty=a.tx*b.b + a.ty*b.d + b.ty)

compose = concat


def rotate(t:Transform, angle:float) -> Transform:
  'Rotate the output of `t` about the origin by `angle` radians.'
  s = sin(angle)
  c = cos(angle)
  return concat(t, Transform(c, s, -s, c, 0, 0))


def apply_point(p:Point, t:Transform) -> Point:
  return Point(
    p.x*t.a + p.y*t.c + t.tx,
    p.x*t.b + p.y*t.d + t.ty)


def apply_rect(r:Rect, t:Transform) -> Rect:
  '''
  Transform the origin and far corner of `r` and return the rect spanning them.
  This is exact only for transforms that preserve axes (scale and translation).
  With rotation or shear, the other two corners are ignored,
  so the result is not the bounding box of the transformed shape.
  '''
  p1 = apply_point(r.origin, t)
  p2 = apply_point(r.far_corner, t)
  return Rect.from_corners(p1, p2)


def invert(t:Transform) -> Transform|None:
  '''
  Return the inverse transform, or None if `t` is singular.
  The determinant is compared against the magnitude of its two products,
  so a matrix that is singular up to rounding also returns None.
  '''
  det = t.det
  if abs(det) <= singular_rel_tol * max(abs(t.a*t.d), abs(t.b*t.c)): return None
  inv = Transform(
    a=t.d / det,
    b=-t.b / det,
    c=-t.c / det,
    d=t.a / det,
    tx=(t.c*t.ty - t.d*t.tx) / det,
    ty=(t.b*t.tx - t.a*t.ty) / det)
  # A tiny but nonzero determinant can still overflow.
  if not inv.is_finite: return None
  return inv


def scale_x(t:Transform) -> float:
  'The uniform scale factor of `t`, assuming no shear.'
  return hypot(t.a, t.c)


def rotation(t:Transform) -> float:
  'The angle in radians of the transformed x basis vector.'
  return atan2(t.b, t.a)


def translation_x(t:Transform) -> float:
  return t.tx
