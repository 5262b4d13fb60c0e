# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

import pytest

from frozendict import frozendict
from pydantic import BaseModel
from rich.pretty import pretty_repr

from valargs.util.helpers import FrozenDict


class Model(BaseModel):
    mapping: FrozenDict[str, int]


@pytest.mark.helpers
class TestFrozenDictAnnotation:
    def test_validates_dict(self):
        model = Model(mapping={"a": 1, "b": "2"})
        assert isinstance(model.mapping, frozendict)
        assert model.mapping == {"a": 1, "b": 2}

    def test_keeps_frozendict(self):
        value = frozendict(a=1)
        assert Model(mapping=value).mapping == value

    def test_serializes_to_dict(self):
        dump = Model(mapping={"a": 1}).model_dump()
        assert dump == {"mapping": {"a": 1}}
        assert type(dump["mapping"]) is dict

    def test_rich_repr(self):
        assert "a=1" in pretty_repr(frozendict(a=1))
