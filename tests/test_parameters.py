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

from io import StringIO

import pytest
from pydantic import ValidationError

from grandom.mt19937.generator import MT19937
from grandom.mt19937.parameters import MT19937Parameters, parse_yaml_parameters


def test_defaults():
    parameters = MT19937Parameters()
    assert parameters.state_length == 624
    assert parameters.state_period == 397
    assert parameters.matrix_a == 0x9908B0DF
    assert parameters.upper_mask == 0x80000000
    assert parameters.lower_mask == 0x7FFFFFFF
    assert parameters.auto_seeder is None


def test_parse_yaml_file(data_directory):
    with (data_directory / "parameters.yaml").open("r") as file:
        parameters = parse_yaml_parameters(file)

    assert parameters == MT19937Parameters(matrix_a=0x8808C1DF)
    assert MT19937(1, parameters).matrix_a == 0x8808C1DF


def test_parse_partial_yaml():
    parameters = parse_yaml_parameters(StringIO("generator:\n  state-period: 300\n"))
    assert parameters.state_period == 300
    assert parameters.state_length == 624


def test_yaml_rejects_unknown_option():
    with pytest.raises(ValidationError):
        parse_yaml_parameters(StringIO("generator:\n  tempering-mask: 1\n"))


@pytest.mark.parametrize(
    "options",
    [
        {"state_length": 1},
        {"state_length": -624},
        {"state_period": 0},
        {"matrix_a": 2**32},
        {"upper_mask": -1},
        {"lower_mask": 0x1FFFFFFFF},
    ],
)
def test_out_of_range_values_are_rejected(options):
    with pytest.raises(ValidationError):
        MT19937Parameters(**options)


def test_parameters_are_frozen():
    parameters = MT19937Parameters()
    with pytest.raises(ValidationError):
        parameters.state_length = 10
