"""Color state for the picker: three RGB channels and the derived HEX string."""
import math
import string
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

CHANNELS = ('red', 'green', 'blue')
CHANNEL_MIN = 0
CHANNEL_MAX = 255
DEFAULT_RGB = (127, 127, 127)

_HEX_DIGITS = set(string.hexdigits.upper())


def clamp_channel(value: float, previous: float = CHANNEL_MIN) -> float:
    """Clamp to 0..255; NaN has no position on the slider, so `previous` is kept."""
    value = float(value)
    if math.isnan(value):
        return previous
    return min(max(value, CHANNEL_MIN), CHANNEL_MAX)


def rgb_to_hex(rgb):
    # int() truncates toward zero, so 127.9 formats as 7F
    return '#{:02X}{:02X}{:02X}'.format(*(int(c) for c in rgb))


def parse_hex(text: str) -> Optional[Tuple[int, int, int]]:
    """Parse `#RRGGBB` or `RRGGBB` (any case, surrounding whitespace allowed).

    Returns None for anything that isn't exactly six hex digits.
    """
    hexstr = text.strip().upper()
    if hexstr.startswith('#'):
        hexstr = hexstr[1:]
    if len(hexstr) != 6 or not set(hexstr) <= _HEX_DIGITS:
        return None
    value = int(hexstr, 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


@dataclass(frozen=True)
class ExportRequest:
    color: Tuple[int, int, int]
    hex: str


class ColorModel:
    """Current picker color.

    Channels are kept as floats so slider positions can be stored as-is; `hex`
    is recomputed on every mutation and subscribers are notified once the new
    state is complete.
    """

    def __init__(self, red: float = DEFAULT_RGB[0], green: float = DEFAULT_RGB[1], blue: float = DEFAULT_RGB[2]):
        self.red = clamp_channel(red, DEFAULT_RGB[0])
        self.green = clamp_channel(green, DEFAULT_RGB[1])
        self.blue = clamp_channel(blue, DEFAULT_RGB[2])
        self.hex = rgb_to_hex((self.red, self.green, self.blue))
        self._subscribers: List[Callable[['ColorModel'], None]] = []

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return int(self.red), int(self.green), int(self.blue)

    def to_hex(self) -> str:
        return self.hex

    def subscribe(self, callback: Callable[['ColorModel'], None]) -> Callable[[], None]:
        """Call `callback(model)` after every mutation. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)
        return unsubscribe

    def set_channel(self, channel: str, value: float):
        if channel not in CHANNELS:
            raise ValueError(f'Unknown channel: {channel!r}')
        setattr(self, channel, clamp_channel(value, getattr(self, channel)))
        self._changed()

    def set_channel_text(self, channel: str, text: str) -> bool:
        """Apply a number typed into a channel field; unparsable text is ignored."""
        try:
            value = float(text.strip())
        except ValueError:
            return False
        if math.isnan(value):
            return False
        self.set_channel(channel, value)
        return True

    def set_rgb(self, red: float, green: float, blue: float):
        self.red = clamp_channel(red, self.red)
        self.green = clamp_channel(green, self.green)
        self.blue = clamp_channel(blue, self.blue)
        self._changed()

    def set_from_hex(self, text: str) -> bool:
        """Set all channels from a HEX string.

        Invalid input leaves the model untouched and returns False; no error is
        raised so the caller can choose whether to surface it.
        """
        rgb = parse_hex(text)
        if rgb is None:
            return False
        self.set_rgb(*rgb)
        return True

    def snapshot(self) -> ExportRequest:
        return ExportRequest(color=self.rgb, hex=self.hex)

    def _changed(self):
        self.hex = rgb_to_hex((self.red, self.green, self.blue))
        for callback in list(self._subscribers):
            callback(self)
