"""
Frame rendering for snake games.

This service draws GameState snapshots by:
1. Rendering each frame using PIL (Pillow)
2. Optionally encoding a sequence of frames to MP4 using MoviePy/FFmpeg

The rendering follows the browser design:
- Checkerboard grass background
- Snake body and a brighter head
- Flower food, coloured by its flower kind
- Score / level header and a game-over overlay
"""

import logging
import os
import tempfile
from typing import Iterable, Optional, Tuple

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image, ImageDraw, ImageFont

from domain.constants import GRID_SIZE
from domain.game_state import GameState

logger = logging.getLogger(__name__)

DEFAULT_FPS = 5
DEFAULT_FRAME_SIZE = 400


class ColorScheme:
    """Color configuration matching the browser version"""

    DARK_GRASS = "#2d5a3c"
    LIGHT_GRASS = "#3a734d"
    SNAKE = "#8fde5d"
    SNAKE_HEAD = "#b6ff82"

    FLOWER_CENTER = "#ffd23f"
    FLOWER_PETALS = {
        "cherry_blossom": "#ffb7c5",
        "rose": "#e0115f",
        "hibiscus": "#ff4f6d",
        "sunflower": "#ffc300",
        "blossom": "#fff4a3",
        "bouquet": "#c77dff",
        "tulip": "#ff6f91",
    }
    DEFAULT_PETAL = "#ffffff"

    TEXT = "#FFFFFF"
    TEXT_SHADOW = "#000000"
    OVERLAY = (0, 0, 0, 150)


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def _load_font(size: int):
    try:
        return ImageFont.truetype("DejaVuSans-Bold.ttf", size)
    except OSError:
        return ImageFont.load_default()


class SnakeFrameRenderer:
    """Render GameState snapshots to images and videos"""

    def __init__(
        self,
        width: int = DEFAULT_FRAME_SIZE,
        height: int = DEFAULT_FRAME_SIZE,
        fps: int = DEFAULT_FPS,
        grid_size: int = GRID_SIZE
    ):
        if width < grid_size or height < grid_size:
            raise ValueError(
                f"Drawing surface {width}x{height} is too small for a {grid_size}x{grid_size} grid"
            )
        self.width = width
        self.height = height
        self.fps = fps
        self.grid_size = grid_size

        # Cell size derives from the available drawing surface
        self.cell_size = min(width, height) // grid_size
        self.board_pixels = self.cell_size * grid_size
        self.board_x = (width - self.board_pixels) // 2
        self.board_y = (height - self.board_pixels) // 2

        self.font_small = _load_font(max(10, self.cell_size))
        self.font_large = _load_font(max(14, self.cell_size * 2))

    def cell_origin(self, x: int, y: int) -> Tuple[int, int]:
        """Top-left pixel of grid cell (x, y)"""
        return (self.board_x + x * self.cell_size, self.board_y + y * self.cell_size)

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', (self.width, self.height), hex_to_rgb(ColorScheme.DARK_GRASS))
        draw = ImageDraw.Draw(img)

        self._draw_grass(draw)
        self._draw_snake(draw, state)
        if state.food is not None:
            self._draw_flower(draw, state.food, state.flower)
        self._draw_header(draw, state)

        if state.is_over:
            img = self._draw_game_over(img)

        return img

    def render_png(self, state: GameState, path_or_buffer) -> None:
        self.render_frame(state).save(path_or_buffer, format="PNG")

    def _draw_grass(self, draw: ImageDraw.ImageDraw):
        size = self.cell_size
        for y in range(self.grid_size):
            for x in range(self.grid_size):
                color = ColorScheme.DARK_GRASS if (x + y) % 2 == 0 else ColorScheme.LIGHT_GRASS
                px, py = self.cell_origin(x, y)
                draw.rectangle([px, py, px + size - 1, py + size - 1], fill=hex_to_rgb(color))

    def _draw_snake(self, draw: ImageDraw.ImageDraw, state: GameState):
        # Tail first so the head is painted on top
        for idx in range(len(state.snake) - 1, -1, -1):
            x, y = state.snake[idx]
            color = ColorScheme.SNAKE_HEAD if idx == 0 else ColorScheme.SNAKE
            self._draw_cell(draw, x, y, hex_to_rgb(color), padding=1)

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single grid cell inset by `padding` pixels"""
        px, py = self.cell_origin(x, y)
        size = self.cell_size
        # Tiny cells have no room for an inset
        padding = min(padding, (size - 1) // 2)
        draw.rectangle(
            [px + padding, py + padding, px + size - 1 - padding, py + size - 1 - padding],
            fill=color
        )

    def _draw_flower(self, draw: ImageDraw.ImageDraw, food: Tuple[int, int], flower: Optional[str]):
        px, py = self.cell_origin(*food)
        size = self.cell_size
        cx = px + size / 2
        cy = py + size / 2
        petal = max(1.0, size * 0.22)
        reach = size * 0.22
        petal_color = hex_to_rgb(ColorScheme.FLOWER_PETALS.get(flower, ColorScheme.DEFAULT_PETAL))

        for ox, oy in ((0, -reach), (reach, 0), (0, reach), (-reach, 0)):
            draw.ellipse(
                [cx + ox - petal, cy + oy - petal, cx + ox + petal, cy + oy + petal],
                fill=petal_color
            )

        center = max(1.0, size * 0.14)
        draw.ellipse(
            [cx - center, cy - center, cx + center, cy + center],
            fill=hex_to_rgb(ColorScheme.FLOWER_CENTER)
        )

    def _draw_header(self, draw: ImageDraw.ImageDraw, state: GameState):
        text = f"Score: {state.score} | Level: {state.level}"
        x = self.board_x + 4
        y = self.board_y + 2
        draw.text((x + 1, y + 1), text, fill=hex_to_rgb(ColorScheme.TEXT_SHADOW), font=self.font_small)
        draw.text((x, y), text, fill=hex_to_rgb(ColorScheme.TEXT), font=self.font_small)

    def _draw_game_over(self, img: Image.Image) -> Image.Image:
        overlay = Image.new('RGBA', img.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)
        draw.rectangle(
            [self.board_x, self.board_y, self.board_x + self.board_pixels, self.board_y + self.board_pixels],
            fill=ColorScheme.OVERLAY
        )

        for text, font, offset in (
            ("GAME OVER", self.font_large, -self.cell_size),
            ("Tap or press space to restart", self.font_small, self.cell_size),
        ):
            bbox = draw.textbbox((0, 0), text, font=font)
            text_width = bbox[2] - bbox[0]
            text_height = bbox[3] - bbox[1]
            draw.text(
                (self.width // 2 - text_width // 2, self.height // 2 - text_height // 2 + offset),
                text,
                fill=hex_to_rgb(ColorScheme.TEXT) + (255,),
                font=font
            )

        return Image.alpha_composite(img.convert('RGBA'), overlay).convert('RGB')

    def generate_video(
        self,
        states: Iterable[GameState],
        output_path: Optional[str] = None,
        game_id: str = "snake"
    ) -> str:
        """
        Generate a video from a sequence of snapshots

        Args:
            states: Snapshots in play order (e.g. one per tick)
            output_path: Optional output path (if None, uses temp file)
            game_id: Used to name the temp file

        Returns:
            Path to the generated video file
        """
        frames = []
        for i, state in enumerate(states):
            if i % 50 == 0:
                logger.info(f"Rendering frame {i + 1}")
            frames.append(np.array(self.render_frame(state)))

        if not frames:
            raise ValueError("Cannot generate a video without any frames")

        logger.info(f"Rendered {len(frames)} frames, creating video...")

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"{game_id}_replay.mp4")

        clip = ImageSequenceClip(frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path
