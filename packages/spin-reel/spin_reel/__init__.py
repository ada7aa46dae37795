"""spin-reel - Rotating value reels for spin."""
from __future__ import annotations

from spin_reel.reel import Reel
from spin_reel.surface import DrawingSurface, RecordingSurface
from spin_reel.types import ReelSettings, ReelStyle

__all__ = ["Reel", "ReelSettings", "ReelStyle", "DrawingSurface", "RecordingSurface"]
