# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Web-Mercator latitude projection and geodesic helpers.
Latitudes and longitudes are in degrees.
'''

from math import atan, atan2, cos, exp, log, pi, radians, sin, sqrt, tan

from .point import Point
from .rect import Rect


__all__ = [
  'earth_radius_m',
  'lat_lon_for_map_point',
  'lat_to_latp',
  'latp_to_lat',
  'map_point_for_lat_lon',
  'map_world_size',
  'mean_earth_radius_m',
  'meters_apart',
  'projected_latitude',
  'surface_area',
  'unprojected_latitude',
]


earth_radius_m = 6378137.0 # WGS84 equatorial radius.
mean_earth_radius_m = 6371000.0

map_world_size = 256.0 # Map points span a square of this size.

q_pi = pi * 0.25
deg_per_rad = 180 / pi


def lat_to_latp(lat:float) -> float:
  'Project a latitude into Web-Mercator latitude.'
  return deg_per_rad * log(tan(q_pi + radians(lat)/2))


def latp_to_lat(latp:float) -> float:
  'Inverse of `lat_to_latp`.'
  return deg_per_rad * (2 * atan(exp(radians(latp))) - pi/2)


projected_latitude = lat_to_latp
unprojected_latitude = latp_to_lat


def map_point_for_lat_lon(lat:float, lon:float) -> Point:
  '''
  Convert a latitude and longitude to a point in the map world square.
  x increases eastward from the antimeridian; y increases southward from the top of the projection.
  '''
  x = (lon + 180) / 360 * map_world_size
  y = (180 - lat_to_latp(lat)) / 360 * map_world_size
  return Point(x, y)


def lat_lon_for_map_point(p:Point) -> tuple[float, float]:
  'Inverse of `map_point_for_lat_lon`; returns (lat, lon).'
  lon = p.x / map_world_size * 360 - 180
  lat = latp_to_lat(180 - p.y / map_world_size * 360)
  return (lat, lon)


def surface_area(lat_lon:Rect) -> float:
  '''
  Area in square meters of a latitude/longitude box on a spherical earth.
  The rect origin is (lon, lat) and its size is (lon span, lat span), all in degrees.
  Intended as a relative weighting metric rather than a precise geodesic area.
  '''
  lon1 = radians(lat_lon.x)
  lat1 = radians(lat_lon.y)
  lon2 = radians(lat_lon.max_x)
  lat2 = radians(lat_lon.max_y)
  return earth_radius_m * earth_radius_m * abs(sin(lat2) - sin(lat1)) * abs(lon2 - lon1)


def meters_apart(lat1:float, lon1:float, lat2:float, lon2:float) -> float:
  'Great-circle distance between two positions, using the haversine formula.'
  phi1 = radians(lat1)
  phi2 = radians(lat2)
  d_phi = phi2 - phi1
  d_lambda = radians(lon2 - lon1)
  a = sin(d_phi/2)**2 + cos(phi1) * cos(phi2) * sin(d_lambda/2)**2
  a = min(a, 1.0) # Rounding can push antipodal points just past 1.
  c = 2 * atan2(sqrt(a), sqrt(1 - a))
  return mean_earth_radius_m * c
