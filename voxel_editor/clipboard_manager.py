"""
Clipboard storage for the Voxel Editor.
One clipboard per actor, replaced wholesale by the next copy.
"""

from typing import Dict, Hashable, Optional

from .models import Clipboard


class ClipboardManager:
    def __init__(self):
        self.clipboards: Dict[Hashable, Clipboard] = {}

    def store(self, actor: Hashable, clipboard: Clipboard):
        self.clipboards[actor] = clipboard

    def get(self, actor: Hashable) -> Optional[Clipboard]:
        """The actor's clipboard, or None if it has nothing to paste."""
        clipboard = self.clipboards.get(actor)
        if clipboard is None or clipboard.is_empty():
            return None
        return clipboard

    def clear(self, actor: Hashable):
        self.clipboards.pop(actor, None)
