"""Width-aware text primitives for character terminals.

Cell widths of Unicode text, exact-width cropping and padding, styled
segments and greedy word wrapping. Rendering itself is left to callers.
"""

from .cells import cell_len, chop_cells, get_character_cell_size, set_cell_size
from .control import Control, strip_control_codes
from .errors import CellsError
from .measure import Measurement
from .segment import Segment
from .span import Span
from .style import Style
from .wrap import divide_line, wrap

__version__ = "0.1.0"

__all__ = [
    "cell_len",
    "chop_cells",
    "get_character_cell_size",
    "set_cell_size",
    "Control",
    "strip_control_codes",
    "CellsError",
    "Measurement",
    "Segment",
    "Span",
    "Style",
    "divide_line",
    "wrap",
]
