"""
render.py: pixel drawing of a solved maze with PIL.

Row 0 sits at the bottom of the maze rectangle, col 0 at the left, so North
(row + 1) points up the image. Walls come from GridGraph.walls(); the path is
drawn through cell centres, one segment per animation frame.
"""

from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from mazepath.orchestrator import MazeRun

# -------------------------
# Defaults
# -------------------------
DEF_CANVAS_W = 720
DEF_CANVAS_H = 480

DEF_WALL_PX  = 4     # wall thickness (px)
DEF_KNOB_PX  = 16    # start/goal circle diameter (px)
DEF_PATH_PX  = 3     # solution segment thickness (px)
DEF_FRAME_MS = 250   # pause between path segments

# Axis pads reserve space for tick numbers + "row"/"col" captions
AXIS_PAD_LEFT   = 34  # px
AXIS_PAD_TOP    = 28  # px
AXIS_PAD_RIGHT  = 8   # px
AXIS_PAD_BOTTOM = 8   # px
DEF_PADS = (AXIS_PAD_LEFT, AXIS_PAD_TOP, AXIS_PAD_RIGHT, AXIS_PAD_BOTTOM)

MIN_TICK_CELL_PX = 12  # below this, tick numbers overlap

WHITE       = (255, 255, 255)
BLACK       = (0, 0, 0)
START_RED   = (255, 0, 0)
GOAL_GREEN  = (0, 200, 0)
PATH_ORANGE = (255, 165, 0)
DEBUG_CYAN  = (0, 200, 220)


# -------------------------
# Geometry
# -------------------------

class GeometryError(ValueError):
    """The grid does not fit the canvas at the requested cell size."""


def compute_geometry(rows: int, cols: int,
                     canvas: Tuple[int, int] = (DEF_CANVAS_W, DEF_CANVAS_H),
                     cell_px: Optional[int] = None,
                     pads: Tuple[int, int, int, int] = DEF_PADS) -> Tuple[int, int, int, int, int]:
    """
    Returns (canvas_w, canvas_h, cell_px, x0, y0); (x0, y0) is the top-left of the maze rect.
    """
    W, H = canvas
    padL, padT, padR, padB = pads
    inner_w = W - padL - padR
    inner_h = H - padT - padB
    if inner_w <= 0 or inner_h <= 0:
        raise GeometryError("Canvas too small for given axis pads.")

    if cell_px is None:
        cell_px = min(inner_w // cols, inner_h // rows)
        if cell_px <= 0:
            raise GeometryError(f"Grid {rows}x{cols} too large for inner region {inner_w}x{inner_h}.")

    maze_w = cols * cell_px
    maze_h = rows * cell_px
    if maze_w > inner_w or maze_h > inner_h:
        raise GeometryError("cell_px too large for inner region with axes pads.")

    x0 = padL + (inner_w - maze_w) // 2
    y0 = padT + (inner_h - maze_h) // 2
    return W, H, cell_px, x0, y0


def cell_center_xy(r: int, c: int, rows: int, cell_px: int, x0: int, y0: int) -> Tuple[float, float]:
    x = x0 + (c + 0.5) * cell_px
    y = y0 + (rows - 1 - r + 0.5) * cell_px
    return x, y


# -------------------------
# Drawing primitives
# -------------------------

def _line(draw: ImageDraw.ImageDraw, x0, y0, x1, y1, w, color=BLACK):
    draw.line([(int(x0), int(y0)), (int(x1), int(y1))], fill=color, width=int(w))

def _circle(draw: ImageDraw.ImageDraw, cx, cy, r, color):
    x0, y0 = int(cx - r), int(cy - r)
    x1, y1 = int(cx + r), int(cy + r)
    draw.ellipse([x0, y0, x1, y1], fill=color, outline=None)

def _load_font():
    try:
        return ImageFont.load_default()
    except OSError:
        return None


class MazePainter:
    """Holds the geometry of one run so frames can share it."""

    def __init__(self, run: MazeRun,
                 canvas: Tuple[int, int] = (DEF_CANVAS_W, DEF_CANVAS_H),
                 cell_px: Optional[int] = None,
                 wall_px: int = DEF_WALL_PX,
                 knob_px: int = DEF_KNOB_PX,
                 path_px: int = DEF_PATH_PX,
                 draw_axes: bool = True,
                 debug: bool = False):
        self.run = run
        self.rows, self.cols = run.rows, run.cols
        self.W, self.H, self.cell_px, self.x0, self.y0 = compute_geometry(
            self.rows, self.cols, canvas, cell_px)
        self.wall_px = wall_px
        self.knob_px = knob_px
        self.path_px = path_px
        self.draw_axes = draw_axes
        self.debug = debug

    def center(self, v: int) -> Tuple[float, float]:
        r, c = self.run.graph.cell_of(v)
        return cell_center_xy(r, c, self.rows, self.cell_px, self.x0, self.y0)

    def draw_maze(self) -> Image.Image:
        rows, cols, cell_px, x0, y0 = self.rows, self.cols, self.cell_px, self.x0, self.y0
        maze_w = cols * cell_px
        maze_h = rows * cell_px

        im = Image.new("RGB", (self.W, self.H), WHITE)
        dr = ImageDraw.Draw(im)

        # Every cell boxed in cyan underneath the real walls
        if self.debug:
            for cc in range(cols + 1):
                x = x0 + cc * cell_px
                _line(dr, x, y0, x, y0 + maze_h, 1, color=DEBUG_CYAN)
            for rr in range(rows + 1):
                y = y0 + rr * cell_px
                _line(dr, x0, y, x0 + maze_w, y, 1, color=DEBUG_CYAN)

        walls = self.run.graph.walls()
        for r in range(rows):
            for c in range(cols):
                xL = x0 + c * cell_px
                xR = xL + cell_px
                yT = y0 + (rows - 1 - r) * cell_px
                yB = yT + cell_px
                n, e, s, w = walls[r, c]
                if n:
                    _line(dr, xL, yT, xR, yT, self.wall_px)
                if e:
                    _line(dr, xR, yT, xR, yB, self.wall_px)
                if s:
                    _line(dr, xL, yB, xR, yB, self.wall_px)
                if w:
                    _line(dr, xL, yT, xL, yB, self.wall_px)

        cx_s, cy_s = self.center(self.run.start)
        cx_g, cy_g = self.center(self.run.goal)
        _circle(dr, cx_s, cy_s, self.knob_px // 2, START_RED)
        _circle(dr, cx_g, cy_g, self.knob_px // 2, GOAL_GREEN)

        if self.draw_axes and cell_px >= MIN_TICK_CELL_PX:
            font = _load_font()
            for c in range(cols):
                cx = x0 + c * cell_px + cell_px // 2
                dr.text((cx - 3, max(0, y0 - 14)), str(c), fill=BLACK, font=font)
            dr.text((x0 + maze_w // 2 - 10, max(0, y0 - 28)), "col", fill=BLACK, font=font)
            for r in range(rows):
                cy = y0 + (rows - 1 - r) * cell_px + cell_px // 2
                dr.text((max(0, x0 - 18), cy - 6), str(r), fill=BLACK, font=font)
            dr.text((max(0, x0 - 35), y0 + maze_h // 2 - 6), "row", fill=BLACK, font=font)

        return im

    def draw_segment(self, im: Image.Image, u: int, v: int):
        dr = ImageDraw.Draw(im)
        (x_a, y_a), (x_b, y_b) = self.center(u), self.center(v)
        _line(dr, x_a, y_a, x_b, y_b, self.path_px, color=PATH_ORANGE)

    def path_frames(self) -> List[Image.Image]:
        """Bare maze first, then one frame per path step; frame k shows the first k segments."""
        img = self.draw_maze()
        frames = [img.copy()]
        path = self.run.path
        for u, v in zip(path, path[1:]):
            self.draw_segment(img, u, v)
            frames.append(img.copy())
        return frames

    def solved_image(self) -> Image.Image:
        return self.path_frames()[-1]


# -------------------------
# Module-level helpers
# -------------------------

def draw_maze(run: MazeRun, **kwargs) -> Image.Image:
    return MazePainter(run, **kwargs).draw_maze()

def path_frames(run: MazeRun, **kwargs) -> List[Image.Image]:
    return MazePainter(run, **kwargs).path_frames()

def save_image(img: Image.Image, out_path: str):
    img.save(out_path)

def save_animation(frames: Sequence[Image.Image], out_path: str, frame_ms: int = DEF_FRAME_MS):
    if not frames:
        raise ValueError("no frames to save")
    first, rest = frames[0], list(frames[1:])
    first.save(out_path, save_all=True, append_images=rest, duration=frame_ms, loop=0)
