# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Evaluate map geometry operations from the command line.'

from argparse import ArgumentParser, Namespace
from typing import Callable, Iterable

from ..io import errL, outL
from ..mercator import lat_to_latp, latp_to_lat, map_point_for_lat_lon, meters_apart
from ..point import fmt_float, Point
from ..transform import apply_point, invert, Transform


def main() -> None:
  parser = ArgumentParser(prog='mapgeom', description='Evaluate map geometry operations.')
  subs = parser.add_subparsers(dest='cmd', required=True)

  def add_cmd(name:str, fn:Callable[[Namespace], str], help:str, *fields:str) -> None:
    p = subs.add_parser(name, help=help)
    for field in fields:
      p.add_argument(field, type=float)
    p.set_defaults(fn=fn)

  add_cmd('latp', cmd_latp, 'Project a latitude to Web-Mercator latitude.', 'lat')
  add_cmd('lat', cmd_lat, 'Unproject a Web-Mercator latitude.', 'latp')
  add_cmd('map-point', cmd_map_point, 'Convert a latitude and longitude to a map point.', 'lat', 'lon')
  add_cmd('meters', cmd_meters, 'Great-circle distance in meters between two positions.', 'lat1', 'lon1', 'lat2', 'lon2')
  add_cmd('invert', cmd_invert, 'Invert an affine transform.', *transform_fields)
  add_cmd('apply', cmd_apply, 'Apply an affine transform to a point.', *transform_fields, 'x', 'y')

  args = parser.parse_args()
  try: res = args.fn(args)
  except ValueError as e: exit(f'error: {e}')
  outL(res)


transform_fields = ('a', 'b', 'c', 'd', 'tx', 'ty')


def fmt_floats(floats:Iterable[float]) -> str:
  return ' '.join(fmt_float(f) for f in floats)


def transform_from_args(args:Namespace) -> Transform:
  return Transform(*(getattr(args, f) for f in transform_fields))


def cmd_latp(args:Namespace) -> str:
  if not -90 < args.lat < 90: raise ValueError(f'latitude out of range: {fmt_float(args.lat)}')
  return fmt_float(lat_to_latp(args.lat))


def cmd_lat(args:Namespace) -> str:
  return fmt_float(latp_to_lat(args.latp))


def cmd_map_point(args:Namespace) -> str:
  if not -90 < args.lat < 90: raise ValueError(f'latitude out of range: {fmt_float(args.lat)}')
  return fmt_floats(map_point_for_lat_lon(args.lat, args.lon))


def cmd_meters(args:Namespace) -> str:
  return fmt_float(meters_apart(args.lat1, args.lon1, args.lat2, args.lon2))


def cmd_invert(args:Namespace) -> str:
  t = transform_from_args(args)
  inv = invert(t)
  if inv is None:
    errL(f'singular transform: {t}')
    raise ValueError('transform is not invertible')
  return fmt_floats((inv.a, inv.b, inv.c, inv.d, inv.tx, inv.ty))


def cmd_apply(args:Namespace) -> str:
  return fmt_floats(apply_point(Point(args.x, args.y), transform_from_args(args)))


if __name__ == '__main__': main()
