"""
Explicit categorical value type.

**Conceptual**: A categorical (factor) value is stored as a small integer code
plus an ordered table of labels. The code says *which* label applies; the
label is the meaningful value. Mixing the two up is the classic bug when a
numeric-looking categorical ("10", "20", "30") is converted with its codes
(0, 1, 2) instead of its labels.

`Factor` makes the code/label split explicit and converts to and from
`pd.Categorical`, which uses the same layout (`codes` + `categories`, with
code -1 meaning missing).
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

MISSING_CODE = -1


@dataclass(frozen=True)
class Factor:
    """
    A sequence of categorical values: integer codes into an ordered label table.

    Attributes:
        codes: One code per element; -1 marks a missing element.
        levels: Ordered, unique label strings.

    Raises:
        ValueError: If levels repeat or a code falls outside [-1, len(levels)).
    """
    codes: Tuple[int, ...]
    levels: Tuple[str, ...]

    def __post_init__(self):
        """Normalize to tuples and validate codes against the label table."""
        object.__setattr__(self, "codes", tuple(int(code) for code in self.codes))
        object.__setattr__(self, "levels", tuple(str(level) for level in self.levels))

        if len(set(self.levels)) != len(self.levels):
            raise ValueError(f"Factor levels must be unique, got: {list(self.levels)}")

        bad = [code for code in self.codes if code < MISSING_CODE or code >= len(self.levels)]
        if bad:
            raise ValueError(
                f"Factor codes must be -1 or in [0, {len(self.levels)}), got: {bad}"
            )

    def __len__(self) -> int:
        return len(self.codes)

    @classmethod
    def from_values(
        cls,
        values: Iterable[Any],
        levels: Optional[Sequence[Any]] = None,
    ) -> "Factor":
        """
        Encode raw values as a Factor.

        Levels default to the sorted unique non-missing values, so numeric
        input sorts numerically (2 before 10) before being turned into labels.
        Values not found among `levels` are encoded as missing.

        Example:
            >>> f = Factor.from_values([3, 1, 3, None])
            >>> f.levels, f.codes
            (('1', '3'), (1, 0, 1, -1))
        """
        raw = list(values)
        if levels is None:
            levels = sorted({value for value in raw if not pd.isna(value)})
        labels = [str(level) for level in levels]
        positions = {label: position for position, label in enumerate(labels)}

        codes = [
            MISSING_CODE if pd.isna(value) else positions.get(str(value), MISSING_CODE)
            for value in raw
        ]
        return cls(codes=tuple(codes), levels=tuple(labels))

    @classmethod
    def from_categorical(cls, categorical: Any) -> "Factor":
        """Build a Factor from a pd.Categorical or a categorical-dtype Series."""
        if isinstance(categorical, pd.Series):
            categorical = categorical.array
        if not isinstance(categorical, pd.Categorical):
            raise TypeError(
                f"expected pd.Categorical or categorical Series, got {type(categorical).__name__}"
            )
        return cls(
            codes=tuple(categorical.codes.tolist()),
            levels=tuple(str(category) for category in categorical.categories),
        )

    def to_categorical(self) -> pd.Categorical:
        """Convert to a pd.Categorical with the same codes and label order."""
        return pd.Categorical.from_codes(list(self.codes), categories=list(self.levels))

    def labels(self) -> List[Optional[str]]:
        """Per-element label, None where the code is missing."""
        return [None if code == MISSING_CODE else self.levels[code] for code in self.codes]
