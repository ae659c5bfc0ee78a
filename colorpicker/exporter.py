"""Render the current color as a PNG swatch card and save it through a dialog."""
import io
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from colorpicker.color_model import ExportRequest, rgb_to_hex
from colorpicker.debug import debug_log, report_error

CANVAS_SIZE = 500
CARD_MARGIN = 20
CARD_PADDING = 16
BORDER_WIDTH = 1
SWATCH_HEIGHT = 200
LABEL_PADDING = 10
FONT_SIZE = 18
FONT_CANDIDATES = ('DejaVuSans-Bold.ttf', 'Arial Bold.ttf', 'arialbd.ttf', 'arial.ttf')

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

FILE_SUFFIX = '_ExportedColor.png'

Box = Tuple[int, int, int, int]


class ExportError(Exception):
    """Rendering or encoding the swatch failed."""


@dataclass(frozen=True)
class CardLayout:
    """Pixel boxes of the export card; boxes are (left, top, right, bottom), right/bottom exclusive."""
    canvas_size: Tuple[int, int]
    card: Box
    swatch: Box
    label: Box
    text_origin: Tuple[int, int]


def load_label_font(size: int = FONT_SIZE):
    candidates = [os.getenv('COLORPICKER_FONT')] + list(FONT_CANDIDATES)
    for name in candidates:
        if not name:
            continue
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    debug_log('no TrueType label font found, using Pillow default')
    return ImageFont.load_default()


def suggested_file_name(hexval: str) -> str:
    return hexval.replace('#', '') + FILE_SUFFIX


def _target_mode(path: Path) -> int:
    # overwrite keeps the old file's permissions; a new file gets what open() would give it
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_file_atomic(path: Path, data: bytes):
    """Write `data` next to `path` and move it into place, so a failed write leaves no partial file."""
    tmp = tempfile.NamedTemporaryFile(dir=path.parent, prefix='.' + path.name, suffix='.tmp', delete=False)
    tmp_path = tmp.name
    try:
        with tmp:
            tmp.write(data)
        # NamedTemporaryFile is created 0600
        os.chmod(tmp_path, _target_mode(path))
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def inspect_png(data: bytes):
    """Decode an exported PNG and return ((width, height), center_hex).

    Diagnostic helper for scripts/debug_start.py and the tests; the export path never calls it.
    """
    with Image.open(io.BytesIO(data)) as im:
        arr = np.array(im.convert('RGB'))
    h, w = arr.shape[:2]
    return (w, h), rgb_to_hex(arr[h // 2, w // 2])


class ColorExporter:
    """Build the 500x500 export card: white canvas, bordered card, color block over its HEX label."""

    def __init__(self, font=None):
        self.font = font if font is not None else load_label_font()

    suggested_file_name = staticmethod(suggested_file_name)

    def layout(self, hexval: str) -> CardLayout:
        # measure with every hex digit so the card height doesn't depend on the value
        _, ref_top, _, ref_bottom = self.font.getbbox('#0123456789ABCDEF')
        text_left, _, text_right, _ = self.font.getbbox(hexval)
        text_h = ref_bottom - ref_top
        label_h = text_h + 2 * LABEL_PADDING
        card_w = CANVAS_SIZE - 2 * CARD_MARGIN
        card_h = 2 * (BORDER_WIDTH + CARD_PADDING) + SWATCH_HEIGHT + label_h
        left = CARD_MARGIN
        top = (CANVAS_SIZE - card_h) // 2
        card = (left, top, left + card_w, top + card_h)
        inset = BORDER_WIDTH + CARD_PADDING
        inner_left, inner_right = left + inset, left + card_w - inset
        swatch = (inner_left, top + inset, inner_right, top + inset + SWATCH_HEIGHT)
        label = (inner_left, swatch[3], inner_right, swatch[3] + label_h)
        text_w = text_right - text_left
        text_x = inner_left + (inner_right - inner_left - text_w) // 2 - text_left
        text_y = label[1] + LABEL_PADDING - ref_top
        return CardLayout((CANVAS_SIZE, CANVAS_SIZE), card, swatch, label, (text_x, text_y))

    def render(self, color, hexval: str) -> Image.Image:
        lay = self.layout(hexval)
        out = Image.new('RGB', lay.canvas_size, WHITE)
        draw = ImageDraw.Draw(out)
        # Pillow rectangles include their right/bottom edge
        x0, y0, x1, y1 = lay.card
        draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=WHITE, outline=BLACK, width=BORDER_WIDTH)
        x0, y0, x1, y1 = lay.swatch
        draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=tuple(int(c) for c in color))
        x0, y0, x1, y1 = lay.label
        draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=WHITE)
        draw.text(lay.text_origin, hexval, fill=BLACK, font=self.font)
        return out

    def encode_png(self, image: Image.Image) -> bytes:
        with io.BytesIO() as buf:
            image.save(buf, format='PNG')
            return buf.getvalue()

    def export(self, request: ExportRequest):
        """Return (png_bytes, suggested_name) for `request`."""
        try:
            with self.render(request.color, request.hex) as image:
                data = self.encode_png(image)
        except (OSError, ValueError, MemoryError) as e:
            raise ExportError(f'Unable to render {request.hex}: {e}') from e
        return data, self.suggested_file_name(request.hex)

    def save(self, request: ExportRequest, dialog) -> Optional[Path]:
        """Render `request`, ask `dialog.ask_path(name)` for a destination and write the PNG.

        Returns the written path, or None when rendering failed, the user
        cancelled, or the write failed. Nothing is retried.
        """
        try:
            data, name = self.export(request)
        except ExportError as e:
            debug_log(f'export aborted: {e}')
            return None
        p = dialog.ask_path(name)
        if not p:
            debug_log('export cancelled')
            return None
        path = Path(p)
        try:
            write_file_atomic(path, data)
        except OSError as e:
            report_error(f'Error writing PNG file: {e}')
            return None
        debug_log(f'export saved: {path}')
        return path
