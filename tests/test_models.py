"""Tests for result dataclasses and their tabular views."""
import dataclasses
from datetime import timedelta

import pandas as pd
import pytest

from n2yo.api.decoders import decode_positions, decode_radio_passes, decode_visual_passes
from n2yo.core.models import PositionContext, Satellite

from conftest import POSITIONS_RESPONSE, RADIO_PASSES_RESPONSE, VISUAL_PASSES_RESPONSE


class TestImmutability:

    def test_satellite_frozen(self):
        satellite = Satellite(id=25544, name="SPACE STATION")
        with pytest.raises(dataclasses.FrozenInstanceError):
            satellite.name = "ISS"

    def test_pass_frozen(self):
        radio = decode_radio_passes(RADIO_PASSES_RESPONSE).result.passes[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            radio.base = None

    def test_value_equality(self):
        a = decode_radio_passes(RADIO_PASSES_RESPONSE)
        b = decode_radio_passes(RADIO_PASSES_RESPONSE)
        assert a == b


class TestToDict:

    def test_position_to_dict(self):
        position = decode_positions(POSITIONS_RESPONSE).result.positions[0]
        data = position.to_dict()
        assert data["time"] == "2018-03-18T06:26:58+00:00"
        assert data["azimuth"] == pytest.approx(254.31)

    def test_visible_pass_to_dict(self):
        visible = decode_visual_passes(VISUAL_PASSES_RESPONSE).result.passes[0]
        data = visible.to_dict()
        assert data["duration_s"] == 555
        assert data["magnitude"] == pytest.approx(-2.4)
        assert data["azimuth_max"] == pytest.approx(225.45)

    def test_radio_pass_has_no_visual_fields(self):
        radio = decode_radio_passes(RADIO_PASSES_RESPONSE).result.passes[0]
        assert set(radio.to_dict()) == {
            "rise", "set", "elevation", "azimuth_start", "azimuth_max", "azimuth_end",
        }


class TestToDataFrame:

    def test_positions_frame(self):
        df = decode_positions(POSITIONS_RESPONSE).result.to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 2
        assert list(df.columns) == [
            "ra", "dec", "time", "azimuth", "elevation", "latitude", "longitude",
        ]
        assert df["elevation"].iloc[1] == pytest.approx(-69.06)

    def test_radio_passes_frame(self):
        df = decode_radio_passes(RADIO_PASSES_RESPONSE).result.to_dataframe()
        assert len(df) == 2
        assert df["elevation"].tolist() == pytest.approx([45.08, 23.1])

    def test_visual_passes_frame(self):
        df = decode_visual_passes(VISUAL_PASSES_RESPONSE).result.to_dataframe()
        assert df["duration_s"].iloc[0] == timedelta(seconds=555).total_seconds()

    def test_empty_frame(self):
        context = PositionContext(positions=(), satellite=Satellite(1, "X"))
        assert context.to_dataframe().empty
