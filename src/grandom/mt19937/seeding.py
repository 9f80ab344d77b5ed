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
import random
import secrets
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from numbers import Integral
from typing import Tuple, Union

from pydantic import BaseModel


@dataclass(frozen=True)
class Unseeded:
    """
    No seed was supplied, one has to be drawn from an auto seeder.
    """


@dataclass(frozen=True)
class ScalarSeed:
    # kept as supplied, only its low 32 bits reach the state
    value: int


@dataclass(frozen=True)
class ArraySeed:
    key: Tuple[int, ...]


Seed = Union[Unseeded, ScalarSeed, ArraySeed]

SeedLike = Union[None, int, Iterable]


def make_seed(value: SeedLike) -> Seed:
    """
    Classifies a user supplied seed.

    Integers (numpy integers included) give a scalar seed, any other iterable of
    integers gives an array seed. Strings are not accepted as keys.
    """
    if value is None:
        return Unseeded()
    if isinstance(value, Integral):
        return ScalarSeed(int(value))
    if isinstance(value, (BaseModel, Mapping)):
        raise TypeError("Seed must be an integer or a sequence of integers, pass generator options as parameters=.")
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise TypeError(f"Seed must be an integer or a sequence of integers, got {type(value).__name__}.")

    key = tuple(value)
    if not key:
        raise ValueError("Seed sequence must not be empty.")
    for word in key:
        if not isinstance(word, Integral):
            raise TypeError(f"Seed sequence must only contain integers, got {type(word).__name__}.")
    return ArraySeed(tuple(int(word) for word in key))


class AutoSeeder(ABC):
    """
    Provides a seed to generators built without one.
    """

    @abstractmethod
    def __call__(self) -> int:
        ...


class EntropyAutoSeeder(AutoSeeder):
    """
    Draws seeds from the operating system entropy source.
    """

    def __call__(self) -> int:
        return secrets.randbits(32)


class ClockAutoSeeder(AutoSeeder):
    """
    Scales a draw of the python RNG by the wall clock time in milliseconds.
    """

    def __call__(self) -> int:
        return int(random.random() * time.time() * 1000) & 0xFFFFFFFF


DEFAULT_AUTO_SEEDER: AutoSeeder = EntropyAutoSeeder()
