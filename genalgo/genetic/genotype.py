"""
🧬 Genotype Class
Fixed-length bit vector representation of solution candidates
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple

import numpy as np

from genalgo.core.exceptions import ConfigurationError


class Genotype:
    """
    Genotype class representing a candidate solution as a fixed-length bit vector.

    Genotypes behave as values: ``copy()`` produces an independent instance and
    operators never edit their inputs, they build new genotypes instead. Bit
    access is bounds checked on ``[0, size())``.
    """

    __slots__ = ("_bits",)

    def __init__(self, size: int):
        """
        Initialize an all-zero genotype.

        Args:
            size: Number of bits, must be >= 1
        """
        if int(size) != size or size < 1:
            raise ConfigurationError(f"Genotype size must be a positive integer, got {size}")
        self._bits = np.zeros(int(size), dtype=bool)

    @classmethod
    def from_bits(cls, bits: Iterable[Any]) -> 'Genotype':
        """Create a genotype from any iterable of truthy/falsy values."""
        array = np.array([bool(b) for b in bits], dtype=bool)
        return cls._wrap(array)

    @classmethod
    def from_bitstring(cls, text: str) -> 'Genotype':
        """Create a genotype from a string of '0' and '1' characters."""
        if not text or set(text) - {"0", "1"}:
            raise ConfigurationError(f"Invalid bitstring: {text!r}")
        return cls._wrap(np.fromiter((c == "1" for c in text), dtype=bool, count=len(text)))

    @classmethod
    def _wrap(cls, array: np.ndarray) -> 'Genotype':
        # takes ownership of array
        if array.ndim != 1 or array.size < 1:
            raise ConfigurationError("Genotype requires a non-empty one-dimensional bit array")
        genotype = cls.__new__(cls)
        genotype._bits = array
        return genotype

    def copy(self) -> 'Genotype':
        """Create an independent copy of the genotype."""
        return Genotype._wrap(self._bits.copy())

    def size(self) -> int:
        """Number of bits."""
        return self._bits.size

    def _check_index(self, index: int) -> int:
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Genotype indices must be integers, not {type(index).__name__}")
        if not 0 <= index < self._bits.size:
            raise IndexError(f"Bit index {index} out of range [0, {self._bits.size})")
        return int(index)

    def get(self, index: int) -> bool:
        """Get value of the bit at ``index``."""
        return bool(self._bits[self._check_index(index)])

    def set(self, index: int, bit: Any):
        """Set value of the bit at ``index``."""
        self._bits[self._check_index(index)] = bool(bit)

    @property
    def bits(self) -> np.ndarray:
        """Read-only numpy view over the bits."""
        view = self._bits.view()
        view.flags.writeable = False
        return view

    def count_ones(self) -> int:
        """Number of bits set to 1."""
        return int(np.count_nonzero(self._bits))

    def to_bitstring(self) -> str:
        """Convert genotype to a '0'/'1' string."""
        return "".join("1" if b else "0" for b in self._bits)

    def __len__(self) -> int:
        return self._bits.size

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __setitem__(self, index: int, bit: Any):
        self.set(index, bit)

    def __iter__(self) -> Iterator[bool]:
        return (bool(b) for b in self._bits)

    def __eq__(self, other: object) -> bool:
        """Check equality based on bits."""
        if not isinstance(other, Genotype):
            return NotImplemented
        return self._bits.size == other._bits.size and bool(np.array_equal(self._bits, other._bits))

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return f"Genotype({self.to_bitstring()})"

    def __repr__(self) -> str:
        return self.__str__()


@dataclass(frozen=True)
class Hypothesis:
    """A genotype paired with the rank it received when entering a population."""

    genotype: Genotype
    rank: Any

    def __iter__(self):
        # allows ``genotype, rank = hypothesis``
        yield self.genotype
        yield self.rank


Couple = Tuple[Genotype, Genotype]
