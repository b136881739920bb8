"""Light/dark 12-step color scales from a single brand color."""

from .color import HSL, hex_to_hsl, hsl_to_hex, normalize_hex
from .config import ExtractorConfig
from .errors import DialogStillOpen, ExtractionError, PaletteError
from .extractor import ExtractionState, ModeExtraction, ScaleExtractor, Stage
from .fallback import fallback_color_scale, fallback_scale
from .pipeline import assemble_palette, fallback_palette, generate_palette
from .scale import ColorScale, GeneratedPalette
from .theory import BasePalette, Scheme, derive_base_palette, random_harmonious_color

__version__ = "0.1.0"
