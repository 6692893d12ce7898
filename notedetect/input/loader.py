"""Audio loading - decode files into mono sample buffers."""

import logging
import numpy as np
import librosa
from pathlib import Path
from typing import Tuple, Optional

from ..core.constants import DEFAULT_SR

logger = logging.getLogger(__name__)


class AudioLoader:
    """Handles audio file loading for note detection."""

    SUPPORTED_FORMATS = {".wav", ".mp3", ".flac", ".ogg", ".m4a", ".aiff"}

    def __init__(
        self,
        target_sr: Optional[int] = DEFAULT_SR,
        mono: bool = True,
        normalize: bool = False,
    ):
        """
        Initialize AudioLoader.

        Args:
            target_sr: Target sample rate for resampling (None keeps the native rate)
            mono: Downmix to mono if True
            normalize: Peak-normalize amplitude if True
        """
        self.target_sr = target_sr
        self.mono = mono
        self.normalize = normalize

    def load(self, path: str) -> Tuple[np.ndarray, int]:
        """
        Load an audio file.

        Args:
            path: Path to audio file

        Returns:
            Tuple of (float64 samples, sample rate)

        Raises:
            ValueError: If file format not supported
            FileNotFoundError: If file doesn't exist
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Audio file not found: {path}")

        if path.suffix.lower() not in self.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported format: {path.suffix}. "
                f"Supported: {sorted(self.SUPPORTED_FORMATS)}"
            )

        audio, sr = librosa.load(str(path), sr=self.target_sr, mono=self.mono)
        logger.debug("Loaded %s: %d samples at %d Hz", path.name, audio.shape[-1], sr)

        audio = audio.astype(np.float64)
        if self.normalize:
            audio = self._normalize(audio)

        return audio, int(sr)

    def _normalize(self, audio: np.ndarray) -> np.ndarray:
        """Normalize audio to [-1, 1] range using peak normalization."""
        peak = np.abs(audio).max() if audio.size else 0.0
        if peak > 0:
            audio = audio / peak
        return audio

    def get_duration(self, audio: np.ndarray, sr: Optional[int] = None) -> float:
        """Get duration in seconds."""
        sr = sr or self.target_sr
        return audio.shape[-1] / sr
