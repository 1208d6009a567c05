"""
Recording loader package.

Turns stored recordings (YAML/JSON files or deserialized storage blobs)
into the ordered item sequence the player consumes.

Design principle: Use Pydantic for the envelope at load time.
Items themselves are checked lazily by the player (see eventreplay_player).
"""

from .loader import load_recording, load_recording_from_file, normalize_recording
from .recording_models import Recording, RecordingSummary

__all__ = [
    "Recording",
    "RecordingSummary",
    "load_recording",
    "load_recording_from_file",
    "normalize_recording",
]
