"""
🔎 Decoder
Sequential reader interpreting genotype bits as domain values

Meant to be used inside rank operators::

    def rank(genotype):
        decoder = Decoder(genotype)
        x = decoder.decode_float(16, -5.0, 5.0)
        return -(x * x)
"""

from genalgo.core.exceptions import check_positive
from .genotype import Genotype


class Decoder:
    """
    Reads consecutive groups of bits, most significant bit first.
    """

    def __init__(self, genotype: Genotype):
        self.genotype = genotype
        self._pos = 0

    def remaining(self) -> int:
        """Number of bits not consumed yet."""
        return len(self.genotype) - self._pos

    def reset(self):
        """Restart reading from the first bit."""
        self._pos = 0

    def _take(self, num_bits: int) -> int:
        num_bits = check_positive("num_bits", num_bits)
        if num_bits > self.remaining():
            raise IndexError(
                f"Cannot decode {num_bits} bits, only {self.remaining()} remaining"
            )
        value = 0
        for i in range(self._pos, self._pos + num_bits):
            value = (value << 1) | int(self.genotype[i])
        self._pos += num_bits
        return value

    def decode_bool(self) -> bool:
        return bool(self._take(1))

    def decode_int(self, num_bits: int) -> int:
        """Decode an unsigned integer stored on ``num_bits`` bits."""
        return self._take(num_bits)

    def decode_float(self, num_bits: int, lo: float, hi: float) -> float:
        """
        Decode a real number in ``[lo, hi]``.

        The unsigned integer read on ``num_bits`` bits is mapped linearly from
        ``[0, 2**num_bits - 1]`` onto ``[lo, hi]``.
        """
        value = self._take(num_bits)
        max_value = (1 << num_bits) - 1
        return lo + (hi - lo) * (value / max_value)
