import logging
import os
from datetime import datetime

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)


def default_output_name(rows: int, cols: int, directory: str = "recordings") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    fname = f"maze_{cols}x{rows}_{ts}.mp4"
    if os.path.isdir(directory):
        return os.path.join(directory, fname)
    return fname


class VideoRecorder:
    """Writes window frames to an mp4. Does nothing unless `active`."""

    def __init__(self, active=False, output_file=None, fps=60):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        # Writer is opened lazily so it matches the first frame's size
        if self.writer is None:
            self.frame_size = surface.get_size()
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info(f"Recording started: {self.output_file}")

        # pygame gives (width, height, RGB); OpenCV wants (height, width, BGR)
        frame = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)

        self.writer.write(frame)
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
