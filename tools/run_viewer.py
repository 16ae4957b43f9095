#!/usr/bin/env python3
# Minimal interactive viewer for generated mazes (no movement/animation).
# - N: new game (fresh seed unless --seed given)
# - Enter: descend through the exit, keeping the current facing
# - Left/Right: rotate the facing used for the next descent
# - 60 Hz fixed loop

import argparse, logging
import pygame
from dungeongen.directions import NAMES, turn_ccw, turn_cw
from dungeongen.render.palette import hex_rgba
from dungeongen.render.surface import draw_maze
from dungeongen.session import GameSession

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=None, help="Game seed (default: current time)")
    ap.add_argument("--width", type=int, default=16)
    ap.add_argument("--height", type=int, default=16)
    ap.add_argument("--tile", type=int, default=32, help="Tile size in pixels")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    session = GameSession(args.width, args.height)
    session.new_game(args.seed)
    facing = session.spawn.direction

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((args.width * args.tile, args.height * args.tile))

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_n:
                    session.new_game(args.seed)
                    facing = session.spawn.direction
                elif ev.key == pygame.K_RETURN:
                    session.next_level(facing)
                    facing = session.spawn.direction
                elif ev.key == pygame.K_RIGHT:
                    facing = turn_cw(facing)
                elif ev.key == pygame.K_LEFT:
                    facing = turn_ccw(facing)

        maze = session.maze
        screen.fill(hex_rgba(session.colors.ceiling))
        draw_maze(screen, maze.grid, maze.spawn, maze.exit, tile=args.tile, colors=session.colors)
        pygame.display.set_caption(
            f"dungeongen | game {session.game_seed}  level {session.level}  "
            f"maze {maze.seed}  hue {session.hue:.0f}  facing {NAMES[facing]}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
