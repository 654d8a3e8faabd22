# ucdmesh

Write meshes to the AVS UCD ASCII format (`.inp`), which ParaView and other
viewers open directly. No third-party libraries are needed.

## Installing

```
pip install .
```

## Usage

`points` is a sequence of points, each a sequence of at least three
coordinates (x, y, z); only the first three are written. Cells refer to
points by zero-based index; the file stores them one-based. Coordinates and
property values are written in scientific notation with 16 digits after the
decimal point.

```python
from ucdmesh.ucd import UCDProperty, export_points, export_polygons

points = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]

export_points("points.inp", points)

area = UCDProperty(label="Area", unit_label="m^2", num_components=1, data=[0.5])
export_polygons("triangle.inp", points, [[0, 1, 2]], polygons_properties=[area])
```

All functions live in `ucdmesh.ucd`. The exporters are:

- `export_points(file_path, points, points_properties=None, materials=None)`:
  one point cell per point. The given properties are written as cell
  properties of those point cells.
- `export_segments(file_path, points, segments, points_properties=None, segments_properties=None, materials=None)`:
  each segment is a pair of point ids.
- `export_polygons(file_path, points, polygons_vertices, points_properties=None, polygons_properties=None, materials=None)`:
  polygons of 3 vertices become triangles, of 4 quadrilaterals.
- `export_polyhedra(file_path, points, polyhedra_vertices, points_properties=None, polyhedra_properties=None, materials=None)`:
  every polyhedron must have exactly 4 vertices (tetrahedra).

A material id is taken from `materials` only when it holds one entry per
cell; otherwise every cell gets material 0.

### Properties

`UCDProperty(label, unit_label, num_components, data)` holds one field whose
values are stored interleaved: the components for item `i` are
`data[num_components * i : num_components * (i + 1)]`. `size` gives the
length of `data`, and `values_for(i)` returns the slice for item `i`.

### Cells and streams

`UCDCell(type, point_ids, material_id=0)` describes one cell, with `type` a
`CellType` member; `label()` returns its UCD keyword (`pt`, `line`, `tri`,
`quad`, `hex`, `prism`, `tet`, `pyr`). `CellType.UNKNOWN` has no keyword and
raises `ValueError`.

To write to an open text stream instead of a file, build cells with
`create_point_cells`, `create_line_cells`, `create_polygon_cells` or
`create_polyhedra_cells` and pass them to
`write_ucd_ascii(stream, points, point_properties, cells, cell_properties)`.
`export_ucd_ascii(file_path, ...)` does the same to a file path.

### Errors

`ValueError` is raised for a polygon that does not have 3 or 4 vertices, a
polyhedron that does not have 4, a segment with fewer than two ids, a point
with fewer than three coordinates, or a property with fewer values than
`num_components` times the number of points or cells. A file that cannot be
opened raises `OSError`.

## Command line

```
ucdmesh
```

prints `Funziona` and exits with status 0. It takes no options besides
`--help`.

## Limits

Only ASCII output is written (`ExportFormat.ASCII` is the only format).
The package does not read UCD files, and the command line does not export
meshes; exporting is done from Python.