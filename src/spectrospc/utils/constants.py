"""Statistical constants for I-MR control chart calculations.

Constants from ASTM E2587 and NIST Engineering Statistics Handbook.
Individuals charts compute moving ranges over consecutive pairs, so only
the subgroup size 2 row of the table applies.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SpcConstants:
    """Statistical constants for a given subgroup size.

    Attributes:
        n: Subgroup size
        d2: Average range factor (used for sigma estimation from MR-bar)
        D3: Lower control limit factor for the range chart
        D4: Upper control limit factor for the range chart
    """
    n: int
    d2: float
    D3: float
    D4: float


# Moving ranges of span 2
IMR_CONSTANTS = SpcConstants(n=2, d2=1.128, D3=0.0, D4=3.267)

D2 = IMR_CONSTANTS.d2
D3 = IMR_CONSTANTS.D3
D4 = IMR_CONSTANTS.D4

# Width of the Individuals chart band, in estimated sigmas
SIGMA_MULTIPLIER = 3.0
