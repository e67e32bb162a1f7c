"""
Configuration settings for the Voxel Editor.
"""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from typing import List
import os
import sys
import toml

from .palette import InvalidContentError, parse_content


class EditorConfig(BaseModel):
    """Configuration settings for the editor and its in-memory world."""

    # History
    undo_limit: int = 20  # Undo entries kept per actor

    # Brushes
    max_brush_radius: int = 32

    # Materials accepted in content specs and masks; empty accepts any name
    known_materials: List[str] = []

    # World settings
    chunk_size: int = 16
    min_y: int = 0
    max_y: int = 256  # Exclusive
    default_material: str = "air"

    model_config = ConfigDict(extra="allow")

    @field_validator("undo_limit", "max_brush_radius", "chunk_size")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("default_material")
    @classmethod
    def _valid_material(cls, v: str) -> str:
        try:
            parse_content(v)
        except InvalidContentError as e:
            raise ValueError(str(e)) from e
        return v

    @model_validator(mode="after")
    def _vertical_bounds(self) -> "EditorConfig":
        if self.max_y <= self.min_y:
            raise ValueError(f"max_y ({self.max_y}) must be greater than min_y ({self.min_y})")
        return self

    @classmethod
    def load_from_toml(cls, path: str = "config.toml") -> "EditorConfig":
        """Load configuration from a TOML file."""
        if not os.path.exists(path):
            print(f"Warning: Config file {path} not found. Using defaults.", file=sys.stderr)
            return cls()

        try:
            with open(path, "r") as f:
                data = toml.load(f)

            # Flatten the [editor] and [world] tables for Pydantic
            settings = dict(data.get("editor", {}))
            settings.update(data.get("world", {}))
            return cls(**settings)
        except Exception as e:
            print(f"Error loading config {path}: {e}", file=sys.stderr)
            return cls()
