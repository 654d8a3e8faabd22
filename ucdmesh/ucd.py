"""Writing point, segment, polygon and polyhedron meshes in the ASCII UCD format."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

Point = Sequence[float]

_CELL_LABELS = {
    "LINE": "line",
    "TRIANGLE": "tri",
    "QUADRILATERAL": "quad",
    "HEXAHEDRON": "hex",
    "PRISM": "prism",
    "TETRAHEDRON": "tet",
    "PYRAMID": "pyr",
    "POINT": "pt",
}


class CellType(enum.Enum):
    """Kinds of cell known to the UCD format."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7

    def label(self) -> str:
        """Return the keyword the UCD format uses for this cell type."""
        try:
            return _CELL_LABELS[self.name]
        except KeyError:
            raise ValueError("Type not supported") from None


class ExportFormat(enum.Enum):
    """Output formats that can be written."""

    ASCII = 0


@dataclass(frozen=True)
class UCDProperty:
    """A named field attached to points or cells, stored component-interleaved."""

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float] = field(default_factory=tuple)

    @property
    def size(self) -> int:
        return len(self.data)

    def values_for(self, index: int) -> Sequence[float]:
        start = self.num_components * index
        return self.data[start:start + self.num_components]


@dataclass(frozen=True)
class UCDCell:
    """One cell: its type, the zero-based ids of its points and its material."""

    type: CellType
    point_ids: tuple[int, ...]
    material_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "point_ids", tuple(int(i) for i in self.point_ids))

    def label(self) -> str:
        return self.type.label()


def _material_picker(materials: Sequence[int] | None, count: int):
    if materials is not None and len(materials) == count:
        return lambda i: int(materials[i])
    return lambda i: 0


def create_point_cells(points: Sequence[Point], materials: Sequence[int] | None = None) -> list[UCDCell]:
    """Make one point cell per point."""
    material = _material_picker(materials, len(points))
    return [UCDCell(CellType.POINT, (p,), material(p)) for p in range(len(points))]


def create_line_cells(lines: Sequence[Sequence[int]], materials: Sequence[int] | None = None) -> list[UCDCell]:
    """Make one line cell per pair of point ids."""
    material = _material_picker(materials, len(lines))
    cells = []
    for index, line in enumerate(lines):
        if len(line) < 2:
            raise ValueError("A segment needs two point ids")
        cells.append(UCDCell(CellType.LINE, (line[0], line[1]), material(index)))
    return cells


def create_polygon_cells(
    polygons_vertices: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make triangle or quadrilateral cells from lists of point ids."""
    material = _material_picker(materials, len(polygons_vertices))
    cells = []
    for index, vertices in enumerate(polygons_vertices):
        if len(vertices) == 3:
            cell_type = CellType.TRIANGLE
        elif len(vertices) == 4:
            cell_type = CellType.QUADRILATERAL
        else:
            raise ValueError("Polygon type not supported")
        cells.append(UCDCell(cell_type, tuple(vertices), material(index)))
    return cells


def create_polyhedra_cells(
    polyhedra_vertices: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make tetrahedron cells from lists of four point ids."""
    material = _material_picker(materials, len(polyhedra_vertices))
    cells = []
    for index, vertices in enumerate(polyhedra_vertices):
        if len(vertices) != 4:
            raise ValueError("Polyhedron type not supported")
        cells.append(UCDCell(CellType.TETRAHEDRON, tuple(vertices), material(index)))
    return cells


def _check_points(points: Sequence[Point]) -> None:
    for point in points:
        if len(point) < 3:
            raise ValueError("Every point needs three coordinates")


def _check_properties(properties: Sequence[UCDProperty], count: int) -> None:
    for prop in properties:
        if len(prop.data) < prop.num_components * count:
            raise ValueError(f"Property '{prop.label}' has too few values")


def _property_lines(properties: Sequence[UCDProperty], count: int) -> Iterable[str]:
    if not properties:
        return
    yield " ".join([str(len(properties))] + [str(p.num_components) for p in properties])
    for prop in properties:
        yield f"{prop.label}, {prop.unit_label}"
    for index in range(count):
        values = (f"{v:.16e}" for prop in properties for v in prop.values_for(index))
        yield " ".join([str(index + 1), *values])


def write_ucd_ascii(
    stream: TextIO,
    points: Sequence[Point],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
) -> None:
    """Write a mesh in ASCII UCD form to an open text stream."""
    _check_points(points)
    _check_properties(point_properties, len(points))
    _check_properties(cell_properties, len(cells))

    def lines() -> Iterable[str]:
        yield f"{len(points)} {len(cells)} {len(point_properties)} {len(cell_properties)} 0"
        for index, point in enumerate(points, start=1):
            yield f"{index} {point[0]:.16e} {point[1]:.16e} {point[2]:.16e}"
        for index, cell in enumerate(cells, start=1):
            ids = " ".join(str(i + 1) for i in cell.point_ids)
            head = f"{index} {cell.material_id} {cell.label()}"
            yield f"{head} {ids}" if ids else head
        yield from _property_lines(point_properties, len(points))
        yield from _property_lines(cell_properties, len(cells))

    for line in lines():
        stream.write(line + "\n")


def export_ucd_ascii(
    file_path,
    points: Sequence[Point],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
) -> None:
    """Write a mesh in ASCII UCD form to the file at ``file_path``."""
    try:
        handle = open(file_path, "w", encoding="utf-8")
    except OSError as exc:
        raise OSError(f"File '{file_path}' cannot be opened") from exc
    with handle:
        write_ucd_ascii(handle, points, point_properties, cells, cell_properties)


def export_points(
    file_path,
    points: Sequence[Point],
    points_properties: Sequence[UCDProperty] | None = None,
    materials: Sequence[int] | None = None,
) -> None:
    """Export points as point cells; the properties are written per cell."""
    export_ucd_ascii(
        file_path,
        points,
        (),
        create_point_cells(points, materials),
        list(points_properties or ()),
    )


def export_segments(
    file_path,
    points: Sequence[Point],
    segments: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] | None = None,
    segments_properties: Sequence[UCDProperty] | None = None,
    materials: Sequence[int] | None = None,
) -> None:
    """Export segments given as pairs of point ids."""
    export_ucd_ascii(
        file_path,
        points,
        list(points_properties or ()),
        create_line_cells(segments, materials),
        list(segments_properties or ()),
    )


def export_polygons(
    file_path,
    points: Sequence[Point],
    polygons_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] | None = None,
    polygons_properties: Sequence[UCDProperty] | None = None,
    materials: Sequence[int] | None = None,
) -> None:
    """Export triangles and quadrilaterals."""
    export_ucd_ascii(
        file_path,
        points,
        list(points_properties or ()),
        create_polygon_cells(polygons_vertices, materials),
        list(polygons_properties or ()),
    )


def export_polyhedra(
    file_path,
    points: Sequence[Point],
    polyhedra_vertices: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] | None = None,
    polyhedra_properties: Sequence[UCDProperty] | None = None,
    materials: Sequence[int] | None = None,
) -> None:
    """Export tetrahedra."""
    export_ucd_ascii(
        file_path,
        points,
        list(points_properties or ()),
        create_polyhedra_cells(polyhedra_vertices, materials),
        list(polyhedra_properties or ()),
    )