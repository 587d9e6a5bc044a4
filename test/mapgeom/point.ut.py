# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from operator import add as op_add, mul, neg, sub as op_sub, truediv

from mapgeom.point import (add, cross_mag, distance, dot, fmt_float, mag, mag_squared, mult, Point, point_offset, Size, sub,
  unit_vector)
from utest import utest, utest_approx, utest_exc, utest_val


# Operators.

utest(Point(-1,-2), neg, Point(1,2))
utest(Point(4,6), op_add, Point(1,2), Point(3,4))
utest(Point(0,0), op_sub, Point(1,2), Point(1,2))
utest(Point(2,4), mul, Point(1,2), 2)
utest(Point(2,4), mul, 2, Point(1,2))
utest(Point(0.5, 1), truediv, Point(1,2), 2)

utest_val(False, bool(Point()))
utest_val(True, bool(Point(0, -1)))

utest_val((3, 4), tuple(Point(3, 4)))
utest_val(4, Point(3, 4)[1])
utest_val(4, Point(3, 4)[-1])
utest_val(2, len(Point(3, 4)))

utest_val('Point(3,4.5)', repr(Point(3, 4.5)))
utest_val('Size(2x3)', repr(Size(2, 3)))
utest_val('inf', fmt_float(float('inf')))


# Free functions.

utest(Point(4,6), add, Point(1,2), Point(3,4))
utest(Point(-2,-2), sub, Point(1,2), Point(3,4))
utest(Point(-3,6), mult, Point(1,-2), -3)

utest(11, dot, Point(1,2), Point(3,4))
utest(0, dot, Point(1,0), Point(0,1))

utest(25, mag_squared, Point(3,4))
utest(5, mag, Point(3,4))
utest(5, mag, Point(-3,-4))

# hypot does not overflow where the naive sum of squares would.
utest_approx(5e200, mag, Point(3e200, 4e200))
utest_approx(5e-200, mag, Point(3e-200, 4e-200))

utest(Point(0.6, 0.8), unit_vector, Point(3,4))
utest(Point(0, -1), unit_vector, Point(0, -7))
utest_approx(1.0, lambda: mag(unit_vector(Point(1.5, -2.5))))
utest_exc(ZeroDivisionError, unit_vector, Point(0, 0))

utest(1, cross_mag, Point(1,0), Point(0,1)) # Counter-clockwise.
utest(-1, cross_mag, Point(0,1), Point(1,0)) # Clockwise.
utest(0, cross_mag, Point(2,4), Point(1,2)) # Parallel.

utest(5, distance, Point(1,1), Point(4,5))
utest(0, distance, Point(1,1), Point(1,1))

utest(Point(3, 1), point_offset, Point(1, 2), 2, -1)
