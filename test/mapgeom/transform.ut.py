# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import pi

from mapgeom.point import Point
from mapgeom.rect import Rect
from mapgeom.transform import (apply_point, apply_rect, compose, concat, identity, invert, make_translation, rotate, rotation,
  scale, scale_x, Transform, translate, translation_x)
from utest import utest, utest_approx, utest_call, utest_val


t0 = Transform(2, 0.5, -1, 3, 4, -5)
t1 = Transform(0.25, -1.5, 2, 0.75, -3, 10)
t_rot = rotate(scale(make_translation(7, -2), 3), 0.7)

utest_val(Transform(1, 0, 0, 1, 0, 0), identity())
utest_val(Transform(), identity())
utest_val('Transform(1, 0, 0, 1, 0, 0)', repr(identity()))
utest_val(-2, Transform(1, 2, 3, 4, 0, 0).det)
utest_val(True, compose is concat)


# Equality is exact, down to the sign of zero.

utest_val(True, Transform(1, 2, 3, 4, 5, 6) == Transform(1.0, 2.0, 3.0, 4.0, 5.0, 6.0))
utest_val(False, Transform(a=-0.0) == Transform(a=0.0))
utest_val(False, Transform(tx=1) == Transform(tx=1 + 2**-52))
utest_val(True, Transform(a=float('nan')) == Transform(a=float('nan')))
utest_val(hash(Transform()), hash(identity()))
utest_val(False, identity() == (1, 0, 0, 1, 0, 0))


# Identity laws.

for t in [t0, t1, Transform(2, 0, 0, 2, 0, 0)]:
  utest(t, concat, identity(), t)
  utest(t, concat, t, identity())

utest(Point(3, -7), apply_point, Point(3, -7), identity())


# Elementary operations.

utest(Transform(1, 0, 0, 1, 5, -6), make_translation, 5, -6)
utest(Transform(2, 0, 0, 2, 4, 5), translate, Transform(2, 0, 0, 2, 1, 1), 3, 4)
utest(Transform(2, 4, 6, 8, 10, 12), scale, Transform(1, 2, 3, 4, 5, 6), 2)

# Translation is applied first and then scaled; the translation is scaled too.
utest(Point(12, 0), apply_point, Point(1, 0), concat(translate(identity(), 5, 0), scale(identity(), 2)))
# The reverse order scales first.
utest(Point(7, 0), apply_point, Point(1, 0), concat(scale(identity(), 2), translate(identity(), 5, 0)))

# `scale` is equivalent to composing with a uniform scale after the transform.
utest(concat(t0, Transform(3, 0, 0, 3, 0, 0)), scale, t0, 3)

utest(Point(6, 9), apply_point, Point(1, 1), Transform(1, 2, 3, 4, 2, 3))

utest_approx(Point(0, 1), apply_point, Point(1, 0), rotate(identity(), pi/2), _abs_tol=1e-12)
utest_approx(Point(-1, 0), apply_point, Point(0, 1), rotate(identity(), pi/2), _abs_tol=1e-12)
utest_approx(0.5, rotation, rotate(identity(), 0.5))
utest_approx(-0.25, rotation, rotate(rotate(identity(), 0.5), -0.75))
utest_approx(2, scale_x, scale(rotate(identity(), 0.3), 2))
utest(5, scale_x, Transform(3, 0, 4, 0, 0, 0))
utest(7, translation_x, Transform(1, 0, 0, 1, 7, 8))


# Composition order.

@utest_call
def test_concat_order() -> None:
  for p in [Point(0, 0), Point(1, -2), Point(-3.5, 8)]:
    utest_approx(apply_point(apply_point(p, t1), t0), apply_point, p, concat(t1, t0))
    utest_approx(apply_point(apply_point(p, t0), t1), apply_point, p, concat(t0, t1))
  utest_val(False, concat(t0, t1) == concat(t1, t0), 'concat is not commutative')


# Rects.

utest(Rect.make(3, 4, 4, 6), apply_rect, Rect.make(1, 1, 2, 2), Transform(2, 0, 0, 3, 1, 1))
# With rotation only the origin and far corner are transformed; the result is not a bounding box.
utest(Rect.make(0, 0, -1, 2), apply_rect, Rect.make(0, 0, 2, 1), Transform(0, 1, -1, 0, 0, 0))


# Inversion.

# The algebraic inverse carries negative zeros, which exact equality distinguishes.
utest(Transform(0.5, -0.0, -0.0, 0.25, -3, -2), invert, Transform(2, 0, 0, 4, 6, 8))
utest(Point(-2.5, -1.75), apply_point, Point(1, 1), invert(Transform(2, 0, 0, 4, 6, 8)))

utest(None, invert, Transform(0, 0, 0, 0, 0, 0))
utest(None, invert, Transform(1, 2, 2, 4, 5, 6))
utest(None, invert, Transform(1e-200, 0, 0, 1e-200, 0, 0)) # Determinant underflows to zero.
utest(None, invert, Transform(1e-160, 0, 0, 1e-160, 1e300, 0)) # Inverse translation overflows.
# The second row is three times the first, but the computed determinant rounds to about 3e-17.
utest_val(True, Transform(0.1, 0.7, 0.3, 2.1, 0, 0).det != 0)
utest(None, invert, Transform(0.1, 0.7, 0.3, 2.1, 0, 0))
utest(None, invert, Transform(0.1, 0.7, 0.3, 2.1, 5, -5))
# Small but well-conditioned matrices still invert.
utest(Transform(2**20, -0.0, -0.0, 2**20, 0, 0), invert, Transform(2**-20, 0, 0, 2**-20, 0, 0))

# Coefficients are stored as floats, so int and float arguments give identical results.
utest_val(True, isinstance(Transform(2, 0, 0, 4, 6, 8).b, float))
utest_val(True, isinstance(identity().a, float))
utest_val(invert(Transform(2.0, 0.0, 0.0, 4.0, 6.0, 8.0)), invert(Transform(2, 0, 0, 4, 6, 8)))
utest_val(concat(Transform(1.0, 0.0, 0.0, 1.0, 0.0, 0.0), t0), concat(identity(), t0))

@utest_call
def test_invert_round_trip() -> None:
  for t in [t0, t1, t_rot, make_translation(-8, 0.125), Transform(0, 2, -3, 0, 1, 1)]:
    inv = invert(t)
    assert inv is not None
    for p in [Point(0, 0), Point(1, 1), Point(-250.5, 1e3)]:
      utest_approx(p, apply_point, p, concat(t, inv), _abs_tol=1e-9)
      utest_approx(p, apply_point, p, concat(inv, t), _abs_tol=1e-9)
