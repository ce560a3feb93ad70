"""Command that reads a scene file, validates it and prints its contents."""

from __future__ import annotations

import os
import sys
from typing import List, Optional, Sequence, Union

from .colors import get_colors
from .grid import check_map_content, get_map_grid, vertical_walls
from .reader import check_extension, read_lines
from .scene import Scene, SceneError
from .textures import check_dup_texture, check_texture, get_texture

__all__ = ["load_scene", "format_map", "format_scene", "main"]


def load_scene(path: Union[str, "os.PathLike[str]"]) -> Scene:
    """Read and validate a scene file.

    Raises SceneError describing the first problem found.
    """
    if not check_extension(path):
        raise SceneError("wrong file name")
    lines = read_lines(path)
    grid = get_map_grid(lines)
    if not check_dup_texture(lines):
        raise SceneError("each texture identifier must appear exactly once")
    try:
        floor, ceiling = get_colors(lines)
    except SceneError as exc:
        raise SceneError(f"invalid color format: {exc}") from exc
    if floor is None or ceiling is None:
        raise SceneError("invalid color format: floor or ceiling missing")
    scene = Scene(
        lines=lines,
        north=get_texture(lines, "NO"),
        south=get_texture(lines, "SO"),
        east=get_texture(lines, "EA"),
        west=get_texture(lines, "WE"),
        floor_color=floor,
        ceiling_color=ceiling,
        grid=grid,
    )
    if not check_texture(scene.textures().values()):
        raise SceneError("invalid texture path")
    if not vertical_walls(grid):
        raise SceneError("map is not closed by walls")
    if not check_map_content(grid):
        raise SceneError("map must hold exactly one player start")
    return scene


def format_map(rows: Sequence[str]) -> str:
    """The grid rows, one per line."""
    return "".join(f"{row}\n" for row in rows)


def format_scene(scene: Scene) -> str:
    """A text report of the scene's colours, textures and map."""
    floor = scene.floor_color or ()
    ceiling = scene.ceiling_color or ()
    out: List[str] = []
    for f_value, c_value in zip(floor, ceiling):
        out.append(f"F : {f_value}\n")
        out.append(f"C : {c_value}\n")
    out.append(f"North : {scene.north}\n")
    out.append(f"South : {scene.south}\n")
    out.append(f"East  : {scene.east}\n")
    out.append(f"West  : {scene.west}\n")
    out.append(format_map(scene.grid))
    return "".join(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the scene file named on the command line and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not check_extension(args[0]):
        print("Error, wrong file name")
        return 1
    try:
        scene = load_scene(args[0])
    except SceneError as exc:
        print(f"Error: {exc}")
        return 1
    sys.stdout.write(format_scene(scene))
    return 0


if __name__ == "__main__":
    sys.exit(main())