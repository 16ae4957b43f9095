#!/usr/bin/env python3
import argparse, csv, json, logging, os
from dungeongen.analysis import summarize
from dungeongen.config import DEFAULT
from dungeongen.mapgen.generator import generate_maze
from dungeongen.points import SpawnPoint
from dungeongen.render.text import dump_grid

def write_tsv(mat, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t', lineterminator='\n')
        for r in mat:
            w.writerow(r)

def write_meta(maze, path, forced=None):
    meta = {
        "width": maze.width,
        "height": maze.height,
        "seed": maze.seed,
        "forced_spawn": forced.as_dict() if forced else None,
        "spawn": maze.spawn.as_dict(),
        "exit": maze.exit.as_dict(),
    }
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(meta, f, indent=2)
        f.write("\n")

def parse_forced(text):
    if not text:
        return None
    try:
        x, y, d = (int(v) for v in text.split(','))
    except ValueError:
        raise SystemExit(f"--spawn expects x,y,direction, got {text!r}")
    return SpawnPoint(x, y, d)

def build(args):
    forced = parse_forced(args.spawn)
    return generate_maze(args.seed, args.width, args.height, forced), forced

def cmd_emit(args):
    maze, forced = build(args)
    write_tsv(maze.as_matrix(), args.out)
    if args.meta:
        write_meta(maze, os.path.splitext(args.out)[0] + ".json", forced)
    print(f"Wrote {args.out}")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for seed in args.seeds:
        maze = generate_maze(seed, args.width, args.height)
        base = os.path.join(args.outdir, f"{args.width}x{args.height}_seed_{seed}")
        write_tsv(maze.as_matrix(), base + ".tsv")
        write_meta(maze, base + ".json")
    print(f"Wrote {len(args.seeds)} mazes to {args.outdir}")

def cmd_show(args):
    maze, _ = build(args)
    dump_grid(maze.grid, maze.spawn, maze.exit, title=f"seed {maze.seed}  spawn {maze.spawn}  exit {maze.exit}")

def cmd_stats(args):
    maze, _ = build(args)
    for k, v in summarize(maze.grid).items():
        print(f"{k}: {v}")

def main():
    p = argparse.ArgumentParser(description="dungeongen maze tool")
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)

    def maze_args(sp):
        sp.add_argument('--seed', type=int, required=True)
        sp.add_argument('--width', type=int, default=DEFAULT.width)
        sp.add_argument('--height', type=int, default=DEFAULT.height)
        sp.add_argument('--spawn', type=str, default=None, help="forced spawn as x,y,direction")

    p1 = sub.add_parser('emit')
    maze_args(p1)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--meta', action='store_true', help="also write spawn/exit JSON beside the TSV")
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--seeds', type=int, nargs='+', required=True)
    p2.add_argument('--width', type=int, default=DEFAULT.width)
    p2.add_argument('--height', type=int, default=DEFAULT.height)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_golden)
    p3 = sub.add_parser('show')
    maze_args(p3)
    p3.set_defaults(func=cmd_show)
    p4 = sub.add_parser('stats')
    maze_args(p4)
    p4.set_defaults(func=cmd_stats)

    args = p.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    args.func(args)

if __name__ == '__main__':
    main()
