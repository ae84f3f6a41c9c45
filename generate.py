# Video Generation Script for Particle Background
# Renders the field off-screen and records it to an MP4 file

import argparse
import datetime
import os
import random
import time

import cv2
import numpy as np
import pygame

import config
from field import ParticleField
from renderer import PygameSurface


class VideoGenerator:
    """
    Records the particle field to video without opening a window.
    One simulation step and one render pass per video frame.
    """
    def __init__(self, width=None, height=None, fps=None, density=None, seed=None, recordings_dir=None):
        self.width = width if width is not None else config.VIDEO_WIDTH
        self.height = height if height is not None else config.VIDEO_HEIGHT
        self.fps = fps if fps is not None else config.VIDEO_FPS
        self.density = density
        self.seed = seed

        # Create recordings directory
        self.recordings_dir = recordings_dir if recordings_dir is not None else config.RECORDINGS_DIR
        if not os.path.exists(self.recordings_dir):
            os.makedirs(self.recordings_dir)
            print(f"Created recordings directory: {self.recordings_dir}")

        # Initialize pygame without display
        os.environ['SDL_VIDEODRIVER'] = 'dummy'
        pygame.init()

        # Create a surface for rendering (no window)
        self.screen = pygame.Surface((self.width, self.height))
        self.surface = PygameSurface(self.screen)

    def create_field(self):
        """Create a new field sized for the video."""
        return ParticleField(
            self.width,
            self.height,
            density=self.density,
            rng=random.Random(self.seed)
        )

    def surface_to_array(self, surface):
        """Convert pygame surface to numpy array for OpenCV."""
        # Get the raw surface data
        w, h = surface.get_size()
        raw = pygame.image.tostring(surface, 'RGB')

        # Convert to numpy array and reshape
        array = np.frombuffer(raw, dtype=np.uint8)
        array = array.reshape((h, w, 3))

        # OpenCV uses BGR, pygame uses RGB
        array = cv2.cvtColor(array, cv2.COLOR_RGB2BGR)

        return array

    def render_frame(self, field):
        """Advance the field by one tick and draw it onto the off-screen surface."""
        field.step()
        self.screen.fill(config.BACKGROUND_COLOR)
        field.render(self.surface)
        return self.surface_to_array(self.screen)

    def record(self, field, video_writer, duration):
        """Record duration seconds of the field. Returns the number of frames written."""
        start_time = time.time()
        total_frames = int(duration * self.fps)
        progress_frames = max(1, int(config.PROGRESS_INTERVAL * self.fps))

        print(f"Recording {duration}s of video ({total_frames} frames, {len(field)} particles)...")

        for frame_count in range(1, total_frames + 1):
            video_writer.write(self.render_frame(field))

            # Print progress every few seconds of video time
            if frame_count % progress_frames == 0:
                elapsed_real_time = time.time() - start_time
                print(f"Recording progress: {frame_count / self.fps:.0f}s video time ({elapsed_real_time:.1f}s real)")

        elapsed_real_time = time.time() - start_time
        print(f"✓ Recording completed: {total_frames} frames (real time: {elapsed_real_time:.1f}s)")
        return total_frames

    def generate_video(self, duration=None, filename=None):
        """
        Record one video of the field and return its path.
        An incomplete file is deleted if recording fails.
        """
        duration = duration if duration is not None else config.VIDEO_DURATION

        if filename is None:
            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"particles_{timestamp}_{self.width}x{self.height}_{self.fps}fps.mp4"
        filepath = os.path.join(self.recordings_dir, filename)

        print(f"Target file: {filepath}")

        fourcc = cv2.VideoWriter_fourcc(*config.VIDEO_FOURCC)
        video_writer = cv2.VideoWriter(filepath, fourcc, float(self.fps), (self.width, self.height))
        if not video_writer.isOpened():
            raise RuntimeError(f"Could not open video writer for {filepath}. Ensure the codec is available.")

        try:
            field = self.create_field()
            self.record(field, video_writer, duration)
        except Exception:
            video_writer.release()
            # Clean up incomplete file
            try:
                os.remove(filepath)
            except OSError:
                pass
            raise

        video_writer.release()
        file_size = os.path.getsize(filepath) / (1024 * 1024)  # MB
        print(f"✓ Successfully generated: {filename} ({file_size:.1f} MB)")
        return filepath


def main():
    parser = argparse.ArgumentParser(description="Record the particle background to an MP4 video.")
    parser.add_argument("--width", type=int, default=config.VIDEO_WIDTH, help="Video width in pixels")
    parser.add_argument("--height", type=int, default=config.VIDEO_HEIGHT, help="Video height in pixels")
    parser.add_argument("--fps", type=int, default=config.VIDEO_FPS, help="Video FPS, one simulation tick per frame")
    parser.add_argument("--duration", type=float, default=config.VIDEO_DURATION, help="Video length in seconds")
    parser.add_argument("--density", type=int, default=config.DENSITY, help="Particles per 100,000 px^2")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible field")
    parser.add_argument("--out", type=str, default=None, help="Output file name inside the recordings directory")
    args = parser.parse_args()

    print("Particle Background - Video Generator")
    print("=" * 50)

    generator = VideoGenerator(
        width=args.width,
        height=args.height,
        fps=args.fps,
        density=args.density,
        seed=args.seed
    )
    try:
        out_path = generator.generate_video(duration=args.duration, filename=args.out)
        print(f"Saved: {out_path}")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
