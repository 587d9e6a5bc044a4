# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='mapgeom',
  version='0.1.0',
  description='2D points, rects, affine transforms and Web-Mercator projection for map rendering.',
  python_requires='>=3.10',

  packages=['mapgeom', 'mapgeom.bin', 'utest'],
  entry_points={'console_scripts': ['mapgeom=mapgeom.bin.mapgeom:main']},
)
