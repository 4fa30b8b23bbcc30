# planar3d

A small, dependency-free library for working with planes in three
dimensions.

A plane is stored in the form `A*x + B*y + C*z - D = 0`: a normal vector
`n = (A, B, C)` and a distance value `d = D`.

## Installation

```
pip install planar3d
```

To run the test suite, install the test extra and run pytest:

```
pip install "planar3d[test]"
pytest
```

## Vectors and rays

`planar3d.vector` provides the building blocks:

* `Vector3(x, y, z)`: an immutable vector, also used for points. It
  supports `+`, `-`, unary `-`, multiplication by a scalar and division by
  a scalar, and has `dot`, `cross`, `magnitude`, `normalize` and
  `ulps_eq`. `Vector3.zero()`, `Vector3.unit_x()`, `Vector3.unit_y()` and
  `Vector3.unit_z()` give the common constants.
* `Vector4(x, y, z, w)`: an immutable four-component vector.
* `Ray3(origin, direction)`: a half-line starting at `origin`.
* `ieee_div(numerator, denominator)`: division that gives infinity or NaN
  instead of raising when the denominator is zero.
* `ulps_eq_scalar(a, b, epsilon, max_ulps)`: true when two floats are
  within `epsilon` of each other or within `max_ulps` units in the last
  place. `epsilon` defaults to the machine epsilon and `max_ulps` to 4.

## Building planes

```python
from planar3d.vector import Vector3, Vector4
from planar3d.plane import Plane

p = Plane(Vector3(1.0, 0.0, 0.0), 1.0)            # x = 1
q = Plane.from_abcd(0.0, 1.0, 0.0, 2.0)           # y = 2
r = Plane.from_vector4(Vector4(0.0, 0.0, 1.0, 3.0))
s = Plane.from_vector4_alt(Vector4(0.0, 0.0, 1.0, -3.0))  # A*x + B*y + C*z + D = 0
t = Plane.from_point_normal(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 1.0))
```

`Plane.from_points(a, b, c)` builds a plane with a unit normal from three
points. It returns `None` when the points lie on one line, because they do
not fix a single plane. `Plane.normalize()` scales the plane so that its
normal has unit length, and returns `None` when the normal is zero.

## Intersections

`Plane.intersection(other)` and `Plane.intersects(other)` accept three
kinds of argument:

* a `Ray3`: the point where the ray meets the plane, as a `Vector3`, or
  `None` when the ray points away from it;
* another `Plane`: the line where the two planes meet, given as a `Ray3`
  whose direction is the cross product of the two normals, or `None` when
  the planes are parallel;
* a pair `(Plane, Plane)`: the single point the three planes share, or
  `None` when they do not meet in one point.

Any other argument raises `TypeError`.

```python
from planar3d.vector import Ray3, Vector3
from planar3d.plane import Plane

plane = Plane.from_abcd(1.0, 0.0, 0.0, -7.0)
ray = Ray3(Vector3(2.0, 3.0, 4.0), Vector3(1.0, 1.0, 1.0).normalize())
plane.intersects(ray)       # True
plane.intersection(ray)     # approximately the point (7, 8, 9)

p0 = Plane(Vector3(1.0, 0.0, 0.0), 1.0)
p1 = Plane(Vector3(0.0, 1.0, 0.0), 2.0)
p2 = Plane(Vector3(0.0, 0.0, 1.0), 3.0)
p0.intersection(p1)         # a ray through (1, 2, 0) along the z axis
p0.intersection((p1, p2))   # the point (1, 2, 3)
```

## Approximate comparison

Floating-point results seldom compare exactly equal. Planes can be
compared component by component within a tolerance in three ways:

* `ulps_eq(other, epsilon, max_ulps)`: within an absolute epsilon or a
  number of units in the last place;
* `abs_diff_eq(other, epsilon)`: within an absolute difference;
* `relative_eq(other, epsilon, max_relative)`: within an absolute or a
  relative difference.

`Vector3` has `ulps_eq` with the same meaning.

The representation of a plane is its equation, for example
`1.0x + 0.0y + 0.0z - 1.0 = 0`.

## What it does not do

The package deals with planes, vectors and rays only. It has no bounding
boxes, spheres, frustums or bounding-volume trees, and no command-line
program.