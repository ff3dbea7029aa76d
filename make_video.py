import os
import argparse
import pygame
import numpy as np
import cv2

import config
from main import ChaosGameSimulation, positive_int


def surface_to_array(surface):
    """Convert pygame surface to numpy array for OpenCV."""
    w, h = surface.get_size()
    raw = pygame.image.tobytes(surface, "RGB")

    array = np.frombuffer(raw, dtype=np.uint8)
    array = array.reshape((h, w, 3))  # pygame string is row-major RGB

    # OpenCV uses BGR, pygame uses RGB
    return cv2.cvtColor(array, cv2.COLOR_RGB2BGR)


def resolve_out_path(out_path: str | None, seed: int | None) -> str:
    # Relative paths and the default name go inside videos/
    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), config.VIDEO_DIR)
    if out_path is None:
        name = f"chaos_seed_{seed}.mp4" if seed is not None else "chaos.mp4"
        out_path = os.path.join(out_dir, name)
    elif not os.path.isabs(out_path):
        out_path = os.path.join(out_dir, out_path)
    os.makedirs(os.path.dirname(out_path), exist_ok=True)
    return out_path


def record_video(
    frames: int = config.VIDEO_FRAMES,
    fps: int = config.VIDEO_FPS,
    points_per_frame: int = config.VIDEO_POINTS_PER_FRAME,
    seed: int | None = None,
    out_path: str | None = None,
    size: int = config.WINDOW_WIDTH,
    margin: int = config.CIRCLE_MARGIN,
):
    """
    Render the chaos game offline and write it to an MP4 file.
    Each video frame adds points_per_frame points to the canvas.
    Returns the path of the written file.
    """
    out_path = resolve_out_path(out_path, seed)

    simulation = ChaosGameSimulation(
        width=size,
        height=size,
        margin=margin,
        points_per_flush=points_per_frame,
        seed=seed,
        headless=True,
    )

    fourcc = cv2.VideoWriter_fourcc(*config.VIDEO_CODEC)
    writer = cv2.VideoWriter(out_path, fourcc, float(fps), (simulation.width, simulation.height))
    if not writer.isOpened():
        pygame.quit()
        raise RuntimeError("Failed to open video writer. Ensure the codec is available.")

    try:
        for frame_counter in range(1, frames + 1):
            simulation.step()
            writer.write(surface_to_array(simulation.screen))

            # Lightweight progress every ~2 seconds
            if frame_counter % max(1, fps * 2) == 0:
                print(f"Rendered {frame_counter} frames (~{frame_counter / fps:.1f}s), "
                      f"{simulation.state.orbit.iterations} points")
    finally:
        writer.release()
        pygame.quit()

    return out_path


def main():
    parser = argparse.ArgumentParser(description="Render the chaos game to an MP4 video.")
    parser.add_argument("--frames", type=positive_int, default=config.VIDEO_FRAMES, help="Number of video frames to render")
    parser.add_argument("--fps", type=positive_int, default=config.VIDEO_FPS, help="Video FPS")
    parser.add_argument("--points-per-frame", type=positive_int, default=config.VIDEO_POINTS_PER_FRAME, help="Points added to the image each frame")
    parser.add_argument("--size", type=positive_int, default=config.WINDOW_WIDTH, help="Square video size in pixels")
    parser.add_argument("--margin", type=int, default=config.CIRCLE_MARGIN, help="Margin subtracted from the size before computing the circle radius")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible video")
    parser.add_argument("--out", type=str, default=None, help="Output MP4 path (default: videos/chaos.mp4)")
    args = parser.parse_args()

    if not 0 <= args.margin < args.size:
        parser.error("--margin must be non-negative and smaller than --size")

    out_path = record_video(
        frames=args.frames,
        fps=args.fps,
        points_per_frame=args.points_per_frame,
        seed=args.seed,
        out_path=args.out,
        size=args.size,
        margin=args.margin,
    )
    print(f"Saved: {out_path}")


if __name__ == "__main__":
    main()
