"""
dataset.py: JSONL dump of many solved mazes, one record per unique maze.
"""

import json
import logging
import os
import random
from typing import Optional, Tuple

from mazepath.orchestrator import MazeConfig, build_and_solve
from mazepath.render import MazePainter, compute_geometry, save_image

log = logging.getLogger(__name__)

DEF_BASE_SEED = 20250924


def generate_dataset(count: int, rows: int, cols: int, out_jsonl: str,
                     base_seed: int = DEF_BASE_SEED,
                     png_dir: Optional[str] = None,
                     max_attempts: Optional[int] = None,
                     debug: bool = False) -> Tuple[int, int]:
    """
    Writes `count` records to out_jsonl; maze i is drawn from random.Random(base_seed + i)
    and skipped when its wall layout was already written.
    Raises GeometryError before anything is written when png_dir is set and the grid
    does not fit the default canvas.
    Returns (records written, unique mazes seen).
    """
    seen = set()
    made = 0
    idx = 0
    if max_attempts is None:
        max_attempts = count * 20
    if png_dir:
        compute_geometry(rows, cols)
        os.makedirs(png_dir, exist_ok=True)

    config = MazeConfig(rows=rows, cols=cols, debug=debug)
    with open(out_jsonl, "w") as f:
        while made < count:
            if idx >= max_attempts:
                log.warning("stopped after %d attempts: only %d unique %dx%d mazes found",
                            idx, made, rows, cols)
                break
            rng = random.Random(base_seed + idx)
            idx += 1
            run = build_and_solve(config, rng)
            sig = run.graph.signature()
            if sig in seen:
                continue
            seen.add(sig)

            s_rc = run.graph.cell_of(run.start)
            g_rc = run.graph.cell_of(run.goal)
            rec = {
                "index": made,
                "rows": rows,
                "cols": cols,
                "signature": sig,
                "start": run.start,
                "goal": run.goal,
                "start_pos": [s_rc[0], s_rc[1]],
                "end_pos": [g_rc[0], g_rc[1]],
                "path": list(run.path),
                "true_path": [[r, c] for (r, c) in run.cells()],
                "path_len": run.path_length,
            }
            f.write(json.dumps(rec) + "\n")

            if png_dir:
                out_png = f"{png_dir}/maze_{made:05d}.png"
                save_image(MazePainter(run).solved_image(), out_png)

            made += 1

    log.info("wrote %d records to %s (unique mazes: %d)", made, out_jsonl, len(seen))
    return made, len(seen)
