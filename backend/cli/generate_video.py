#!/usr/bin/env python3
"""
CLI tool to record an autopilot snake game as an MP4 video

Usage:
    python generate_video.py --output ./replay.mp4

Examples:
    # Greedy autopilot, reproducible food placement
    python generate_video.py --player greedy --seed 7 --output ./greedy.mp4

    # Custom video settings
    python generate_video.py --fps 10 --width 800 --height 800
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from main import run_simulation  # noqa: E402
from players.registry import AVAILABLE_PLAYERS  # noqa: E402
from services.frame_renderer import SnakeFrameRenderer  # noqa: E402

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Record an autopilot snake game as an MP4 video',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        '--player',
        type=str,
        default='greedy',
        choices=AVAILABLE_PLAYERS,
        help='Autopilot that steers the snake (default: greedy)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for reproducible games'
    )
    parser.add_argument(
        '--max_rounds',
        type=int,
        default=1000,
        help='Maximum number of ticks to record (default: 1000)'
    )

    # Output options
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output video file path (default: temp directory)'
    )

    # Video settings
    parser.add_argument(
        '--fps',
        type=int,
        default=config.VIDEO_FPS,
        help=f'Frames per second (default: {config.VIDEO_FPS})'
    )
    parser.add_argument(
        '--width',
        type=int,
        default=config.FRAME_WIDTH,
        help=f'Video width in pixels (default: {config.FRAME_WIDTH})'
    )
    parser.add_argument(
        '--height',
        type=int,
        default=config.FRAME_HEIGHT,
        help=f'Video height in pixels (default: {config.FRAME_HEIGHT})'
    )
    return parser


def main():
    args = build_parser().parse_args()

    try:
        run = run_simulation(
            player_key=args.player,
            max_rounds=args.max_rounds,
            seed=args.seed
        )
        summary = run.summary()
        logger.info(
            f"Recorded {summary['history_length']} frames "
            f"(score {summary['final_score']}, level {summary['level']})"
        )

        generator = SnakeFrameRenderer(
            width=args.width,
            height=args.height,
            fps=args.fps
        )
        video_path = generator.generate_video(run.history, output_path=args.output, game_id=run.game_id)

        print(f"\n✓ Video generated successfully!")
        print(f"  Location: {video_path}")
        print(f"  Size: {os.path.getsize(video_path) / 1024 / 1024:.2f} MB")
        return 0

    except Exception as e:
        logger.error(f"Failed to generate video: {e}", exc_info=True)
        print(f"\n✗ Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
