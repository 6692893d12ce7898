"""Name lookup for the available frequency transforms."""

from typing import Dict, Type, Union

from .base import FrequencyTransform
from .direct import DirectDFT
from .iterative import IterativeFFT
from .recursive import RecursiveFFT
from ..core.errors import InvalidAlgorithmError

ALGORITHMS: Dict[str, Type[FrequencyTransform]] = {
    DirectDFT.name: DirectDFT,
    IterativeFFT.name: IterativeFFT,
    RecursiveFFT.name: RecursiveFFT,
}

DEFAULT_ALGORITHM = IterativeFFT.name


def get_algorithm(algorithm: Union[str, FrequencyTransform]) -> FrequencyTransform:
    """
    Resolve a transform from its name or pass an instance through.

    Args:
        algorithm: Registered name ('direct', 'iterative', 'recursive')
            or a FrequencyTransform instance

    Returns:
        FrequencyTransform instance

    Raises:
        InvalidAlgorithmError: If the name is unknown or the value is not a transform
    """
    if isinstance(algorithm, FrequencyTransform):
        return algorithm
    if isinstance(algorithm, str):
        key = algorithm.strip().lower()
        if key in ALGORITHMS:
            return ALGORITHMS[key]()
        raise InvalidAlgorithmError(
            f"Unknown algorithm: {algorithm!r}. Available: {', '.join(ALGORITHMS)}"
        )
    raise InvalidAlgorithmError(
        f"Invalid frequency domain algorithm: {algorithm!r}"
    )
