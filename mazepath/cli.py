#!/usr/bin/env python3
"""
Maze generator / solver.

Image:
  python -m mazepath.cli image --rows 10 --cols 10 --seed 42 --out maze.png
  # matplotlib figure instead of the PIL raster
  python -m mazepath.cli image --rows 10 --cols 10 --renderer mpl --out maze.png

Animation (one frame per path step):
  python -m mazepath.cli animate --rows 12 --cols 18 --seed 7 --frame-ms 250 --out solve.gif

Text only:
  python -m mazepath.cli solve --rows 4 --cols 4 --debug

Dataset (JSONL + optional PNGs):
  python -m mazepath.cli dataset --count 500 --rows 10 --cols 10 --out mazes.jsonl --png-dir mazes_out
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from mazepath.dataset import DEF_BASE_SEED, generate_dataset
from mazepath.grid_graph import MIN_DIMENSION, InvalidDimension
from mazepath.log_utils import setup_logging
from mazepath.orchestrator import MazeConfig, MazeRun, build_and_solve
from mazepath.render import (DEF_CANVAS_H, DEF_CANVAS_W, DEF_FRAME_MS, DEF_KNOB_PX,
                             DEF_WALL_PX, GeometryError, MazePainter, compute_geometry,
                             save_animation, save_image)
from mazepath.solver import NoPathFound

log = logging.getLogger("mazepath.cli")


def dimension(s: str) -> int:
    try:
        v = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{s!r} is not an integer")
    if v < MIN_DIMENSION:
        raise argparse.ArgumentTypeError(f"rows and cols must both be integers >= {MIN_DIMENSION}")
    return v


def canvas_pair(s: str) -> Tuple[int, int]:
    parts = s.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"{s!r} is not W,H")
    try:
        w, h = int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"{s!r} is not W,H with integer W and H")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"canvas {s!r} must be positive")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mazepath", description="Perfect maze generator with BFS shortest-path solving.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--rows", type=dimension, default=10)
    common.add_argument("--cols", type=dimension, default=10)
    common.add_argument("--debug", action="store_true", help="Log the graph dump, endpoints and path.")
    common.add_argument("--color-logs", action="store_true")
    common.add_argument("--log-file", type=str, default=None)

    drawing = argparse.ArgumentParser(add_help=False)
    drawing.add_argument("--canvas", type=canvas_pair, default=(DEF_CANVAS_W, DEF_CANVAS_H), help=f"W,H (default {DEF_CANVAS_W},{DEF_CANVAS_H})")
    drawing.add_argument("--cell_px", type=int, default=None, help="Fixed cell size in px (optional)")
    drawing.add_argument("--wall_px", type=int, default=DEF_WALL_PX)
    drawing.add_argument("--knob_px", type=int, default=DEF_KNOB_PX)
    drawing.add_argument("--no-axes", action="store_true")

    p_img = sub.add_parser("image", parents=[common, drawing], help="Generate a single solved maze image.")
    p_img.add_argument("--seed", type=int, default=None)
    p_img.add_argument("--renderer", choices=("pil", "mpl"), default="pil")
    p_img.add_argument("--no-path", action="store_true", help="Draw the maze without its solution.")
    p_img.add_argument("--out", type=str, required=True)

    p_anim = sub.add_parser("animate", parents=[common, drawing], help="Animated GIF of the solution being drawn.")
    p_anim.add_argument("--seed", type=int, default=None)
    p_anim.add_argument("--frame-ms", type=int, default=DEF_FRAME_MS)
    p_anim.add_argument("--out", type=str, required=True)

    p_solve = sub.add_parser("solve", parents=[common], help="Generate and solve; log a summary.")
    p_solve.add_argument("--seed", type=int, default=None)

    p_ds = sub.add_parser("dataset", parents=[common], help="Generate a JSONL dataset of unique solved mazes.")
    p_ds.add_argument("--count", type=int, default=1000)
    p_ds.add_argument("--out", type=str, default="mazes.jsonl")
    p_ds.add_argument("--base-seed", type=int, default=DEF_BASE_SEED)
    p_ds.add_argument("--png-dir", type=str, default=None, help="Directory to write per-maze PNGs")

    return parser


def _painter(run: MazeRun, args) -> MazePainter:
    return MazePainter(
        run,
        canvas=args.canvas,
        cell_px=args.cell_px,
        wall_px=args.wall_px,
        knob_px=args.knob_px,
        draw_axes=not args.no_axes,
        debug=args.debug,
    )


def _summary(run: MazeRun):
    log.info("maze %dx%d: %d vertices, %d edges",
             run.rows, run.cols, run.graph.vertex_count(), run.graph.edge_count())
    log.info("start %d %s -> goal %d %s: %d steps",
             run.start, run.graph.cell_of(run.start),
             run.goal, run.graph.cell_of(run.goal), run.path_length)


def run_command(args) -> int:
    if args.cmd == "dataset":
        made, uniq = generate_dataset(
            count=args.count,
            rows=args.rows,
            cols=args.cols,
            out_jsonl=args.out,
            base_seed=args.base_seed,
            png_dir=args.png_dir,
            debug=args.debug,
        )
        log.info("Wrote %d records to %s (unique mazes: %d).", made, args.out, uniq)
        if args.png_dir:
            log.info("PNGs saved to %s", args.png_dir)
        return 0

    if args.cmd == "animate" or (args.cmd == "image" and args.renderer == "pil"):
        compute_geometry(args.rows, args.cols, args.canvas, args.cell_px)

    config = MazeConfig(rows=args.rows, cols=args.cols, seed=args.seed, debug=args.debug)
    run = build_and_solve(config)
    _summary(run)

    if args.cmd == "image":
        if args.renderer == "mpl":
            from mazepath.plot import plot_maze
            plot_maze(run, args.out, show_path=not args.no_path)
        else:
            painter = _painter(run, args)
            img = painter.draw_maze() if args.no_path else painter.solved_image()
            save_image(img, args.out)
        log.info("image saved to %s", args.out)

    elif args.cmd == "animate":
        frames = _painter(run, args).path_frames()
        save_animation(frames, args.out, frame_ms=args.frame_ms)
        log.info("%d frames saved to %s", len(frames), args.out)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug, color_logs=args.color_logs, log_file=args.log_file)
    try:
        return run_command(args)
    except (InvalidDimension, NoPathFound, GeometryError) as e:
        log.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
