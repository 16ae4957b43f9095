#!/usr/bin/env python3
# Render generated mazes (or TSV grids) to PNGs using Pillow.

import argparse, json, logging, os
from dungeongen.grid import Grid
from dungeongen.mapgen.generator import generate_maze
from dungeongen.points import ExitPoint, SpawnPoint
from dungeongen.render.image import save_maze_png
from dungeongen.render.palette import dungeon_colors

def read_meta(tsv_path):
    path = os.path.splitext(tsv_path)[0] + ".json"
    if not os.path.exists(path):
        return None, None
    with open(path, encoding="utf-8") as f:
        meta = json.load(f)
    return SpawnPoint.from_dict(meta["spawn"]), ExitPoint.from_dict(meta["exit"])

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, nargs="*", default=[], help="Seeds to generate and render")
    ap.add_argument("--width", type=int, default=16)
    ap.add_argument("--height", type=int, default=16)
    ap.add_argument("--tsv", type=str, nargs="*", default=[], help="TSV grids to render (spawn/exit read from sidecar .json)")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--hue", type=float, default=None, help="Draw with the level theme for this hue (degrees)")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    colors = dungeon_colors(args.hue) if args.hue is not None else None

    for seed in args.seed:
        maze = generate_maze(seed, args.width, args.height)
        png = os.path.join(args.outdir, f"{args.width}x{args.height}_seed_{seed}.png")
        save_maze_png(maze.grid, png, maze.spawn, maze.exit, tile=args.tile, colors=colors)
        print(f"Wrote {png}")
    for tsv in args.tsv:
        try:
            grid = Grid.from_tsv(tsv)
        except ValueError as e:
            raise SystemExit(str(e))
        spawn, exit_point = read_meta(tsv)
        png = os.path.join(args.outdir, os.path.splitext(os.path.basename(tsv))[0] + ".png")
        save_maze_png(grid, png, spawn, exit_point, tile=args.tile, colors=colors)
        print(f"Wrote {png}")

if __name__ == "__main__":
    main()
