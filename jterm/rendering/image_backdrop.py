#!/usr/bin/env python3
# jterm/rendering/image_backdrop.py
"""
Reference-image renderer for the overview map.
Loads a map picture once and draws it as luminance-mapped ASCII art sized
to the panel. Used instead of the grid when map.reference_image is set.
"""

from __future__ import annotations

import logging
from itertools import groupby
from operator import itemgetter
from typing import Dict, Optional

import numpy as np
from PIL import Image

from jterm.rendering.context import FrameFrag, LineFrag

log = logging.getLogger(__name__)

__all__ = ["ImageBackdrop"]


class ImageBackdrop:
    name = "image"

    def __init__(self):
        self._cache: Dict[str, Optional[Image.Image]] = {}

    def load(self, path: str) -> Optional[Image.Image]:
        """Return the RGB image at ``path`` or None when it cannot be read."""
        if path not in self._cache:
            try:
                with Image.open(path) as img:
                    self._cache[path] = self._flatten(img)
            except (OSError, ValueError) as exc:
                log.warning("Reference image %s unavailable: %s", path, exc)
                self._cache[path] = None
        return self._cache[path]

    @staticmethod
    def _flatten(img: Image.Image) -> Image.Image:
        # Transparent areas become white paper, not black ink
        if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
            rgba = img.convert("RGBA")
            paper = Image.new("RGB", rgba.size, (255, 255, 255))
            paper.paste(rgba, mask=rgba.split()[-1])
            return paper
        return img.convert("RGB")

    @staticmethod
    def _fit(img: Image.Image, w: int, h: int) -> Image.Image:
        if img.size == (w, h):
            return img
        return img.resize((w, h), Image.Resampling.LANCZOS)

    @staticmethod
    def _glyph_plane(arr: np.ndarray, palette: str) -> np.ndarray:
        """Map each pixel to a palette character, dark ink to dense glyphs."""
        glyphs = np.array(list(palette or " ."))
        ink = 1.0 - (arr[..., :3] @ np.array([0.299, 0.587, 0.114])) / 255.0
        idx = np.clip(np.rint(ink * (len(glyphs) - 1)).astype(int), 0, len(glyphs) - 1)
        return glyphs[idx]

    def render(
        self,
        img: Image.Image,
        w: int,
        h: int,
        palette: str,
        use_color: bool = True,
    ) -> FrameFrag:
        if w <= 0 or h <= 0:
            return [[("", "")]]

        arr = np.asarray(self._fit(img, w, h), dtype=np.uint8)
        chars = self._glyph_plane(arr, palette)
        if not use_color:
            return [[("", "".join(row))] for row in chars.tolist()]

        # 4 bits per channel so neighbouring pixels share one style run
        rgb = (arr[..., :3] >> 4) * 17
        frame: FrameFrag = []
        for y in range(h):
            cells = zip(map(tuple, rgb[y].tolist()), chars[y].tolist())
            line: LineFrag = [
                ("fg:#%02x%02x%02x" % colour, "".join(ch for _c, ch in run))
                for colour, run in groupby(cells, key=itemgetter(0))
            ]
            frame.append(line)
        return frame
