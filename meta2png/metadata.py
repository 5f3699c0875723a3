import json
from pathlib import Path
from typing import List

from .errors import MetadataError

METADATA_EXT = ".meta"
MATERIALS_KEY = "Materials"
COLOR_KEY = "Color"


def color_codes(meta: dict) -> List[str]:
    """Material colors in document order, with the leading '#' removed."""
    materials = meta.get(MATERIALS_KEY) if isinstance(meta, dict) else None
    if not isinstance(materials, list):
        raise MetadataError(f"Missing '{MATERIALS_KEY}' list")
    return [str(m[COLOR_KEY]).replace("#", "", 1) for m in materials]


def load_color_codes(path) -> List[str]:
    meta = json.loads(Path(path).read_text(encoding="utf-8"))
    try:
        return color_codes(meta)
    except MetadataError as e:
        raise MetadataError(f"{e} in {path}") from None
