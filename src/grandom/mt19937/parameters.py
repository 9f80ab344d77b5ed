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

from typing import Callable, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field
from yaml import safe_load

MAX_WORD = 0xFFFFFFFF


def _to_kebab(snake: str) -> str:
    return snake.replace("_", "-")


class MT19937Parameters(BaseModel):
    """
    Twist configuration of a generator, fixed once the generator is built.

    Only the value ranges are checked here: a state period which does not fit
    in the state length is reported by the generator when it first needs to
    regenerate its state.
    """

    model_config = ConfigDict(
        alias_generator=_to_kebab,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    # word count of the state vector (N)
    state_length: int = Field(default=624, ge=2, le=MAX_WORD)
    # twist shift distance (M)
    state_period: int = Field(default=397, gt=0, le=MAX_WORD)
    matrix_a: int = Field(default=0x9908B0DF, ge=0, le=MAX_WORD)
    # most significant w-r bits
    upper_mask: int = Field(default=0x80000000, ge=0, le=MAX_WORD)
    # least significant r bits
    lower_mask: int = Field(default=0x7FFFFFFF, ge=0, le=MAX_WORD)

    auto_seeder: Optional[Callable[[], int]] = Field(default=None, exclude=True)


def parse_yaml_parameters(input_parameters: TextIO) -> MT19937Parameters:
    tree = safe_load(input_parameters)
    return MT19937Parameters.model_validate(tree["generator"])
