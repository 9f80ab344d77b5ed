# Copyright (C) 1997 - 2002, Makoto Matsumoto and Takuji Nishimura,
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
#  1. Redistributions of source code must retain the above copyright
#          notice, this list of conditions and the following disclaimer.
#
#  2. Redistributions in binary form must reproduce the above copyright
#          notice, this list of conditions and the following disclaimer in the
#          documentation and/or other materials provided with the distribution.
#
#  3. The names of its contributors may not be used to endorse or promote
#          products derived from this software without specific prior written
#          permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR
# A PARTICULAR PURPOSE ARE DISCLAIMED.  IN NO EVENT SHALL THE COPYRIGHT OWNER OR
# CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL,
# EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO,
# PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR
# PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS
# SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
import dataclasses
from dataclasses import field
from typing import List, Sequence, Tuple

WORD_MASK = 0xFFFFFFFF

# first tempering mask
TEMPERING_MASK_B = 0x9D2C5680
# second tempering mask
TEMPERING_MASK_C = 0xEFC60000

# scalar seed used as baseline by the array initializer
ARRAY_INIT_SEED = 19650218


@dataclasses.dataclass
class MersenneTwister:
    """
    MT19937 state machine with configurable twist constants.

    Tempering is fixed, only the twist (N, M, matrix A and the word split masks)
    can be tuned.
    """

    state_length: int = 624
    state_period: int = 397
    matrix_a: int = 0x9908B0DF
    upper_mask: int = 0x80000000
    lower_mask: int = 0x7FFFFFFF

    mt: List[int] = field(init=False, repr=False)
    mti: int = field(init=False, repr=False)

    _mag: Tuple[int, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.mt = [0] * self.state_length
        self.mti = self.state_length + 1
        self._mag = (0, self.matrix_a)

    def init_with_number(self, seed: int) -> None:
        n = self.state_length
        mt = self.mt
        mt[0] = seed & WORD_MASK
        for i in range(1, n):
            x = mt[i - 1] ^ (mt[i - 1] >> 30)
            mt[i] = (1812433253 * x + i) & WORD_MASK

        self.mti = n

    def init_with_array(self, key: Sequence[int]) -> None:
        """
        Seeds the state from a sequence of 32 bits words, as init_by_array
        of the reference implementation.
        """
        if not key:
            raise ValueError("Seed key must contain at least one word.")

        n = self.state_length
        mt = self.mt
        self.init_with_number(ARRAY_INIT_SEED)

        i, j = 1, 0
        for _ in range(max(n, len(key))):
            x = mt[i - 1] ^ (mt[i - 1] >> 30)
            mt[i] = ((mt[i] ^ (x * 1664525)) + (key[j] & WORD_MASK) + j) & WORD_MASK
            i += 1
            j += 1
            if i >= n:
                mt[0] = mt[n - 1]
                i = 1
            if j >= len(key):
                j = 0

        for _ in range(n - 1):
            x = mt[i - 1] ^ (mt[i - 1] >> 30)
            mt[i] = ((mt[i] ^ (x * 1566083941)) - i) & WORD_MASK
            i += 1
            if i >= n:
                mt[0] = mt[n - 1]
                i = 1

        # MSB is 1, assuring non-zero initial array
        mt[0] = 0x80000000

    def next_u32(self) -> int:
        if self.mti >= self.state_length:
            self._twist()

        y = self.mt[self.mti]
        self.mti += 1

        y ^= y >> 11
        y ^= (y << 7) & TEMPERING_MASK_B
        y ^= (y << 15) & TEMPERING_MASK_C
        y ^= y >> 18

        return y & WORD_MASK

    def _twist(self) -> None:
        n, m = self.state_length, self.state_period
        if not 0 < m < n:
            raise ValueError(
                f"State period must be between 0 and state length {n} (both excluded), got {m}."
            )

        mt = self.mt
        upper, lower, mag = self.upper_mask, self.lower_mask, self._mag

        for kk in range(n - m):
            y = (mt[kk] & upper) | (mt[kk + 1] & lower)
            mt[kk] = mt[kk + m] ^ (y >> 1) ^ mag[y & 1]

        for kk in range(n - m, n - 1):
            y = (mt[kk] & upper) | (mt[kk + 1] & lower)
            mt[kk] = mt[kk + m - n] ^ (y >> 1) ^ mag[y & 1]

        y = (mt[n - 1] & upper) | (mt[0] & lower)
        mt[n - 1] = mt[m - 1] ^ (y >> 1) ^ mag[y & 1]

        self.mti = 0
