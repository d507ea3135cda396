"""
Threshold predicates and the fixed three-way decision matrix.

These are total functions over numbers: they never raise and never
validate their inputs. Negative or non-finite values flow through the
comparisons unchanged.
"""
from ..config import (
    DIMENSION_THRESHOLD,
    MASS_THRESHOLD,
    REJECTED,
    SPECIAL,
    STANDARD,
    VOLUME_THRESHOLD,
)


def is_bulky(
    width: float,
    height: float,
    length: float,
    *,
    dimension_threshold: float = DIMENSION_THRESHOLD,
    volume_threshold: float = VOLUME_THRESHOLD,
) -> bool:
    """
    Determine whether a package is bulky.

    A package is bulky when any single dimension reaches the dimension
    threshold, or when its volume reaches the volume threshold.

    Args:
        width: Package width in centimeters
        height: Package height in centimeters
        length: Package length in centimeters
        dimension_threshold: Override for the per-dimension limit
        volume_threshold: Override for the volume limit

    Returns:
        True if the package is bulky
    """
    # Single dimensions first; volume is only computed when none qualifies
    if (
        width >= dimension_threshold
        or height >= dimension_threshold
        or length >= dimension_threshold
    ):
        return True

    return width * height * length >= volume_threshold


def is_heavy(mass: float, *, mass_threshold: float = MASS_THRESHOLD) -> bool:
    """Return True if mass (kg) reaches the mass threshold."""
    return mass >= mass_threshold


def sort(width: float, height: float, length: float, mass: float) -> str:
    """
    Sort a package into its handling stack.

    Decision matrix:
        bulky and heavy  -> REJECTED
        bulky or heavy   -> SPECIAL
        neither          -> STANDARD

    Returns:
        One of STANDARD, SPECIAL or REJECTED
    """
    bulky = is_bulky(width, height, length)
    heavy = is_heavy(mass)

    if bulky and heavy:
        return REJECTED
    if bulky or heavy:
        return SPECIAL
    return STANDARD
