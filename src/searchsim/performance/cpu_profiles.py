"""
Simulated CPU classes.

A profile is nothing more than a named speed factor applied to measured
wall-clock time after the fact.  The convention used throughout the
project is division:

    adjusted = measured / factor

so a faster CPU carries a LARGER factor and reports SMALLER times.
Basic is the 1.0 baseline.
"""

from enum import Enum
from typing import Union

import numpy as np

from searchsim.core.config import InvalidConfiguration
from searchsim.core.constants import CPU_FACTOR_BASIC, CPU_FACTOR_MID, CPU_FACTOR_PRO


class CPUProfile(Enum):
    """Closed set of simulated CPUs, in menu order (1=Basic, 2=Mid, 3=Pro)."""
    BASIC = ("Basic", CPU_FACTOR_BASIC)
    MID = ("Mid", CPU_FACTOR_MID)
    PRO = ("Pro", CPU_FACTOR_PRO)

    def __init__(self, label: str, factor: float):
        self.label = label
        self.factor = factor

    def adjust(self, measured_s: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Scale measured seconds (scalar or array) to this profile's time."""
        return measured_s / self.factor

    @classmethod
    def from_choice(cls, choice: Union["CPUProfile", int, str]) -> "CPUProfile":
        """
        Resolve a menu number (1-3) or a case-insensitive name.

        Raises:
            InvalidConfiguration: If the choice names no profile.
        """
        if isinstance(choice, cls):
            return choice
        members = list(cls)
        if isinstance(choice, str):
            text = choice.strip()
            if text.isdigit():
                choice = int(text)
            else:
                for profile in members:
                    if text.lower() in (profile.label.lower(), profile.name.lower()):
                        return profile
                raise InvalidConfiguration(
                    f"Unknown CPU profile: {text}. Valid: {[p.label for p in members]}"
                )
        if isinstance(choice, int) and not isinstance(choice, bool) and 1 <= choice <= len(members):
            return members[choice - 1]
        raise InvalidConfiguration(
            f"Unknown CPU profile: {choice!r}. Choose 1-{len(members)} "
            f"or one of {[p.label for p in members]}"
        )

    @classmethod
    def menu(cls) -> str:
        """Prompt text, e.g. '1.Basic 2.Mid 3.Pro'."""
        return " ".join(f"{i}.{p.label}" for i, p in enumerate(cls, start=1))
