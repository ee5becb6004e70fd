"""Unit tests for Pydantic models."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from chromatune.exceptions import ConfigFileInvalidError, ConfigValidationError
from chromatune.models import (
    EmotionalState,
    GenreCharacteristics,
    MusicAnalysisData,
    OKLABColor,
    OKLCHColor,
    PipelineConfig,
    RGBColor,
)


class TestRGBColor:
    """Test RGBColor model."""

    @pytest.mark.unit
    def test_create_color(self):
        color = RGBColor(r=100, g=50, b=25)
        assert color.to_rgb_tuple() == (100, 50, 25)

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that RGB values must be 0-255."""
        with pytest.raises(ValueError):
            RGBColor(r=256, g=0, b=0)

        with pytest.raises(ValueError):
            RGBColor(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_to_hex_is_lower_case(self):
        assert RGBColor(r=203, g=166, b=247).to_hex() == "#cba6f7"

    @pytest.mark.unit
    def test_to_css_triplet(self):
        assert RGBColor(r=203, g=166, b=247).to_css_triplet() == "203,166,247"

    @pytest.mark.unit
    def test_black(self):
        assert RGBColor.black() == RGBColor(r=0, g=0, b=0)


class TestOKLabModels:
    """Test OKLAB / OKLCH models."""

    @pytest.mark.unit
    def test_chroma_property(self):
        assert OKLABColor(L=0.5, a=0.3, b=0.4).chroma == pytest.approx(0.5)

    @pytest.mark.unit
    def test_oklch_hue_range(self):
        with pytest.raises(ValueError):
            OKLCHColor(L=0.5, C=0.1, H=360.0)
        with pytest.raises(ValueError):
            OKLCHColor(L=0.5, C=-0.1, H=10.0)


class TestMusicAnalysisData:
    """Test MusicAnalysisData model."""

    @pytest.mark.unit
    def test_all_fields_optional(self):
        data = MusicAnalysisData()
        assert data.energy is None
        assert not data.has_core_features

    @pytest.mark.unit
    @pytest.mark.parametrize("bad", ["high", True, float("nan"), float("inf"), [0.5]])
    def test_non_numeric_dropped(self, bad):
        data = MusicAnalysisData(energy=bad, valence=0.5)
        assert data.energy is None
        assert not data.has_core_features

    @pytest.mark.unit
    def test_core_features(self):
        assert MusicAnalysisData(energy=0, valence=0).has_core_features

    @pytest.mark.unit
    def test_with_defaults(self):
        filled = MusicAnalysisData(energy=0.9, genre="jazz").with_defaults()
        assert filled.energy == 0.9
        assert filled.valence == 0.5
        assert filled.danceability == 0.5
        assert filled.tempo == 120
        assert filled.mode == 1
        assert filled.genre == "jazz"

    @pytest.mark.unit
    def test_non_string_genre_dropped(self):
        assert MusicAnalysisData(genre=42).genre is None

    @pytest.mark.unit
    def test_cache_token_tracks_content(self):
        a = MusicAnalysisData(energy=0.5, valence=0.5)
        b = MusicAnalysisData(energy=0.5, valence=0.5)
        c = MusicAnalysisData(energy=0.5, valence=0.6)
        assert a.cache_token() == b.cache_token()
        assert a.cache_token() != c.cache_token()


class TestEnums:
    """Test enum helpers."""

    @pytest.mark.unit
    def test_style_class(self):
        assert EmotionalState.CALM.style_class == "organic-emotion-calm"

    @pytest.mark.unit
    def test_emotional_state_is_str(self):
        assert EmotionalState("epic") is EmotionalState.EPIC
        assert EmotionalState.EPIC == "epic"

    @pytest.mark.unit
    def test_genre_characteristics_defaults(self):
        characteristics = GenreCharacteristics()
        assert characteristics.vibrancy_level.value == "standard"
        assert characteristics.emotional_range.value == "moderate"
        assert characteristics.color_temperature.value == "neutral"


class TestPipelineConfig:
    """Test PipelineConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        config = PipelineConfig()
        assert config.cache_capacity == 20
        assert config.cache_ttl_seconds == 300.0
        assert config.default_accent_hex == "#cba6f7"
        assert config.default_preset == "STANDARD"
        assert config.accent_priority[0] == "VIBRANT"

    @pytest.mark.unit
    def test_preset_name_normalized(self):
        assert PipelineConfig(default_preset=" vibrant ").default_preset == "VIBRANT"

    @pytest.mark.unit
    def test_unknown_preset_rejected(self):
        with pytest.raises(ValidationError):
            PipelineConfig(default_preset="NEON")

    @pytest.mark.unit
    def test_bad_accent_rejected(self):
        with pytest.raises(ValidationError):
            PipelineConfig(default_accent_hex="mauve")

    @pytest.mark.unit
    def test_capacity_must_be_positive(self):
        with pytest.raises(ValidationError):
            PipelineConfig(cache_capacity=0)

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        path = tmp_path / "config.json"
        PipelineConfig(cache_capacity=5, default_preset="COSMIC").save(path)

        loaded = PipelineConfig.load_or_default(path)
        assert loaded.cache_capacity == 5
        assert loaded.default_preset == "COSMIC"

    @pytest.mark.unit
    def test_load_missing_returns_defaults(self, tmp_path: Path):
        config = PipelineConfig.load_or_default(tmp_path / "missing.json")
        assert config == PipelineConfig()

    @pytest.mark.unit
    def test_load_invalid_json_raises(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(ConfigFileInvalidError):
            PipelineConfig.load_or_default(path)

    @pytest.mark.unit
    def test_load_invalid_value_raises(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"cache_ttl_seconds": -1}), encoding="utf-8")
        with pytest.raises(ConfigValidationError) as exc_info:
            PipelineConfig.load_or_default(path)
        assert exc_info.value.field == "cache_ttl_seconds"
