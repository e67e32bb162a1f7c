"""
Block content parsing for the Voxel Editor.
Turns user strings such as "oak_stairs[facing=north]" or "stone,dirt" into
BlockState values and material masks.
"""

import re
from typing import FrozenSet, Iterable, Optional, Set

from .models import BlockState

DEFAULT_NAMESPACE = "minecraft"

_CONTENT_RE = re.compile(
    r"^(?:(?P<ns>[a-z0-9_.\-]+):)?(?P<name>[a-z0-9_./\-]+)(?:\[(?P<props>[^\]]*)\])?$"
)
_PROP_RE = re.compile(r"^[a-z0-9_]+$")


class InvalidContentError(ValueError):
    """Raised when a content or pattern string cannot be parsed."""


class Palette:
    """Parses content specs, optionally restricted to a set of known materials."""

    def __init__(self, known_materials: Optional[Iterable[str]] = None):
        self.known_materials: Set[str] = {
            normalize_material(m) for m in (known_materials or [])
        }

    def is_known(self, material: str) -> bool:
        return not self.known_materials or material in self.known_materials

    def parse(self, spec: str) -> BlockState:
        state = parse_content(spec)
        if not self.is_known(state.material):
            raise InvalidContentError(f"Unknown material: {state.material}")
        return state

    def parse_mask(self, mask_string: Optional[str]) -> Optional[FrozenSet[str]]:
        """
        Parse a comma-separated material list such as "stone,dirt".
        Entries that are not valid material names are dropped. Returns None
        (no restriction) when nothing usable remains.
        """
        if mask_string is None or not mask_string.strip():
            return None
        materials = set()
        for part in mask_string.split(","):
            try:
                state = self.parse(part.strip())
            except InvalidContentError:
                continue
            materials.add(state.material)
        return frozenset(materials) if materials else None


def normalize_material(name: str) -> str:
    name = name.strip().lower()
    if name.startswith(DEFAULT_NAMESPACE + ":"):
        name = name[len(DEFAULT_NAMESPACE) + 1 :]
    return name


def parse_content(spec: str) -> BlockState:
    """Parse "material" or "material[key=value,...]" into a BlockState."""
    if spec is None:
        raise InvalidContentError("Missing block content")
    text = spec.strip().lower()
    m = _CONTENT_RE.match(text)
    if not m:
        raise InvalidContentError(f"Invalid block data: {spec}")

    ns, name = m.group("ns"), m.group("name")
    material = name if ns in (None, DEFAULT_NAMESPACE) else f"{ns}:{name}"

    props = {}
    raw = m.group("props")
    if raw is not None and raw.strip():
        for pair in raw.split(","):
            key, sep, value = pair.partition("=")
            key, value = key.strip(), value.strip()
            if not sep or not _PROP_RE.match(key) or not _PROP_RE.match(value):
                raise InvalidContentError(f"Invalid block property '{pair}' in {spec}")
            props[key] = value

    return BlockState(material, tuple(sorted(props.items())))
