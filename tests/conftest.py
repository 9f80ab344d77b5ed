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

from pathlib import Path

import pytest

from grandom.mt19937.generator import MT19937


@pytest.fixture
def data_directory() -> Path:
    return Path(__file__).parent / "data"


@pytest.fixture
def output_directory() -> Path:
    path = Path(__file__).parent / "output"
    path.mkdir(exist_ok=True)
    return path


@pytest.fixture
def generator() -> MT19937:
    return MT19937(5489)
