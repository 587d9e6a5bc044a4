# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
mapgeom provides the 2D geometry used to position, scale and hit-test map content:
points, rects, affine transforms, line queries and Web-Mercator projection.
'''

from .line import *
from .mercator import *
from .point import *
from .rect import *
from .transform import *
