# Copyright (c) 2024, grandom contributors
#
# See AUTHORS.txt
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#
# SPDX-License-Identifier: MPL-2.0
#
# This file is part of the grandom project.
import logging
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

import numpy as np
import numpy.typing as npt

from .mersenne_twister import MersenneTwister
from .parameters import MT19937Parameters
from .seeding import DEFAULT_AUTO_SEEDER, ArraySeed, ScalarSeed, SeedLike, Unseeded, make_seed

logger = logging.getLogger(__name__)

ParametersLike = Union[MT19937Parameters, Mapping[str, Any]]


def _resolve_parameters(parameters: Optional[ParametersLike]) -> MT19937Parameters:
    if parameters is None:
        return MT19937Parameters()
    if isinstance(parameters, MT19937Parameters):
        return parameters
    return MT19937Parameters.model_validate(parameters)


class MT19937:
    """
    Configurable Mersenne Twister pseudorandom number generator.

    The generator is seeded either with a single integer or with a sequence of
    integers, only their low 32 bits are used. Without a seed, one is drawn from
    the auto seeder of the parameters, or from the system entropy source.

    Instances are not thread safe: use one generator per thread.
    """

    def __init__(self, seed: SeedLike = None, parameters: Optional[ParametersLike] = None):
        self._parameters = _resolve_parameters(parameters)
        self._core = MersenneTwister(
            state_length=self._parameters.state_length,
            state_period=self._parameters.state_period,
            matrix_a=self._parameters.matrix_a,
            upper_mask=self._parameters.upper_mask,
            lower_mask=self._parameters.lower_mask,
        )
        self._seed: Union[ScalarSeed, ArraySeed]

        resolved = make_seed(seed)
        if isinstance(resolved, Unseeded):
            auto_seeder: Callable[[], int] = self._parameters.auto_seeder or DEFAULT_AUTO_SEEDER
            logger.debug("No seed supplied, drawing one from %r", auto_seeder)
            resolved = make_seed(auto_seeder())
            if isinstance(resolved, Unseeded):
                raise ValueError("Auto seeder must return a seed, got None.")
        self._init(resolved)

    @property
    def seed(self) -> Union[int, List[int]]:
        """
        Last seed supplied to the generator, as it was given.
        """
        if isinstance(self._seed, ArraySeed):
            return list(self._seed.key)
        return self._seed.value

    def reseed(self, seed: SeedLike) -> None:
        """
        Re-initializes the whole state from a new seed.
        """
        resolved = make_seed(seed)
        if isinstance(resolved, Unseeded):
            raise TypeError("Cannot reseed a generator with None.")
        logger.debug("Reseeding %r", self)
        self._init(resolved)

    @property
    def parameters(self) -> MT19937Parameters:
        return self._parameters

    @property
    def state_length(self) -> int:
        return self._core.state_length

    @property
    def state_period(self) -> int:
        return self._core.state_period

    @property
    def matrix_a(self) -> int:
        return self._core.matrix_a

    @property
    def upper_mask(self) -> int:
        return self._core.upper_mask

    @property
    def lower_mask(self) -> int:
        return self._core.lower_mask

    @property
    def state(self) -> Tuple[int, ...]:
        """
        Snapshot of the state vector, for diagnostics.
        """
        return tuple(self._core.mt)

    @property
    def state_index(self) -> int:
        return self._core.mti

    def random_int32(self) -> int:
        """
        Random integer in [0, 4294967295].
        """
        return self._core.next_u32()

    def random_int31(self) -> int:
        """
        Random integer in [0, 2147483647].
        """
        return self._core.next_u32() >> 1

    def random_float1(self) -> float:
        """
        Random float in [0.0, 1.0].
        """
        return self._core.next_u32() * (1.0 / 4294967295.0)  # divided by 2^32-1

    def random_float2(self) -> float:
        """
        Random float in [0.0, 1.0).
        """
        return self._core.next_u32() * (1.0 / 4294967296.0)  # divided by 2^32

    def random_float3(self) -> float:
        """
        Random float in (0.0, 1.0).
        """
        return (self._core.next_u32() + 0.5) * (1.0 / 4294967296.0)

    def random_float_res53(self) -> float:
        """
        Random float in [0.0, 1.0) with 53-bit resolution.
        """
        a = self._core.next_u32() >> 5
        b = self._core.next_u32() >> 6
        return (a * 67108864.0 + b) / 9007199254740992.0

    def random_int32_array(self, size: int) -> npt.NDArray[np.uint32]:
        """
        Array of `size` random integers in [0, 4294967295].
        """
        _check_size(size)
        return np.fromiter((self._core.next_u32() for _ in range(size)), dtype=np.uint32, count=size)

    def random_float_res53_array(self, size: int) -> npt.NDArray[np.float64]:
        """
        Array of `size` random floats in [0.0, 1.0) with 53-bit resolution.
        """
        _check_size(size)
        return np.fromiter((self.random_float_res53() for _ in range(size)), dtype=np.float64, count=size)

    def __repr__(self) -> str:
        return (
            f"MT19937(state_length={self.state_length}, state_period={self.state_period}, "
            f"matrix_a={self.matrix_a:#010x}, upper_mask={self.upper_mask:#010x}, "
            f"lower_mask={self.lower_mask:#010x})"
        )

    def _init(self, seed: Union[ScalarSeed, ArraySeed]) -> None:
        if isinstance(seed, ArraySeed):
            self._core.init_with_array(seed.key)
        else:
            self._core.init_with_number(seed.value)
        self._seed = seed
        logger.debug("Seeded %r with %s", self, type(seed).__name__)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"Size must be non-negative, got {size}.")
