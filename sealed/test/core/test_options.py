"""Tests for sealed.core.options module."""

from __future__ import annotations

import dataclasses

import pytest

from sealed.core.options import (
    EnergyOption,
    HighlightOption,
    Option,
    Options,
    VolumeOption,
    option_for,
)


class TestOptionsEnum:
    def test_percent_values(self) -> None:
        assert Options.VOLUME.percent == 12
        assert Options.HIGHLIGHT.percent == 23
        assert Options.ENERGY.percent == 25

    def test_members_share_one_shape(self) -> None:
        assert [m.name for m in Options] == ["VOLUME", "HIGHLIGHT", "ENERGY"]
        assert all(isinstance(m.percent, int) for m in Options)

    def test_single_instance_per_constant(self) -> None:
        assert Options(12) is Options.VOLUME


class TestOptionVariants:
    def test_fixed_values(self) -> None:
        assert VolumeOption.value == 12
        assert HighlightOption.value == 23
        assert EnergyOption.value == 25

    def test_heterogeneous_fields(self) -> None:
        assert [f.name for f in dataclasses.fields(VolumeOption)] == ["percent"]
        assert [f.name for f in dataclasses.fields(HighlightOption)] == []
        assert [f.name for f in dataclasses.fields(EnergyOption)] == ["id"]

    def test_many_instances_with_own_state(self) -> None:
        quiet = VolumeOption(percent=10)
        loud = VolumeOption(percent=90)
        assert quiet != loud
        assert quiet.value == loud.value == 12

    def test_instances_are_options(self) -> None:
        assert isinstance(EnergyOption(id=7), Option)
        assert EnergyOption(id=7).value == 25

    def test_frozen(self) -> None:
        option = EnergyOption(id=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            option.id = 2  # type: ignore[misc]


class TestOptionFor:
    @pytest.mark.parametrize(
        ("member", "variant"),
        [
            (Options.VOLUME, VolumeOption),
            (Options.HIGHLIGHT, HighlightOption),
            (Options.ENERGY, EnergyOption),
        ],
    )
    def test_maps_member_to_variant(self, member: Options, variant: type[Option]) -> None:
        assert option_for(member) is variant

    def test_values_agree(self) -> None:
        for member in Options:
            assert option_for(member).value == member.percent
