import dataclasses
import logging

import pytest

from escpos_encoder.config import DEFAULT_CONFIG, EncoderConfig
from escpos_encoder.exceptions import ConfigError
from escpos_encoder.model.enums import DitherAlgorithm, QRErrorLevel, QRModel


class TestEncoderConfigDefaults:
    def test_defaults(self) -> None:
        cfg = EncoderConfig()
        assert cfg.fallback_char == "?"
        assert cfg.fallback_bytes == b"?"
        assert cfg.qr_encoding == "iso-8859-1"
        assert cfg.default_qr_model is QRModel.MODEL_2
        assert cfg.default_qr_size == 6
        assert cfg.default_qr_error_level is QRErrorLevel.M
        assert cfg.default_dither_algorithm is DitherAlgorithm.THRESHOLD
        assert cfg.default_threshold == 128

    def test_default_instance_matches(self) -> None:
        assert DEFAULT_CONFIG == EncoderConfig()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.fallback_char = "*"  # type: ignore[misc]


class TestEncoderConfigValidation:
    def test_enum_fields_are_normalised(self) -> None:
        cfg = EncoderConfig(
            default_qr_model=1,  # type: ignore[arg-type]
            default_qr_error_level="H",  # type: ignore[arg-type]
            default_dither_algorithm="atkinson",  # type: ignore[arg-type]
        )
        assert cfg.default_qr_model is QRModel.MODEL_1
        assert cfg.default_qr_error_level is QRErrorLevel.H
        assert cfg.default_dither_algorithm is DitherAlgorithm.ATKINSON

    @pytest.mark.parametrize("fallback", ["", "??", "é", "\n", 63])
    def test_invalid_fallback_char(self, fallback: object) -> None:
        with pytest.raises(ConfigError, match="fallback_char"):
            EncoderConfig(fallback_char=fallback)  # type: ignore[arg-type]

    def test_unknown_qr_encoding(self) -> None:
        with pytest.raises(ConfigError, match="qr_encoding"):
            EncoderConfig(qr_encoding="no-such-codec")

    @pytest.mark.parametrize("size", [0, 9, True, "6"])
    def test_invalid_qr_size(self, size: object) -> None:
        with pytest.raises(ConfigError, match="default_qr_size"):
            EncoderConfig(default_qr_size=size)  # type: ignore[arg-type]

    @pytest.mark.parametrize("threshold", [-1, 256, 12.5])
    def test_invalid_threshold(self, threshold: object) -> None:
        with pytest.raises(ConfigError, match="default_threshold"):
            EncoderConfig(default_threshold=threshold)  # type: ignore[arg-type]

    def test_unknown_enum_value(self) -> None:
        with pytest.raises(ConfigError, match="dither algorithm"):
            EncoderConfig(default_dither_algorithm="sierra")  # type: ignore[arg-type]


class TestFromMapping:
    def test_known_keys(self) -> None:
        cfg = EncoderConfig.from_mapping({"fallback_char": "#", "default_qr_size": 3})
        assert cfg.fallback_char == "#"
        assert cfg.default_qr_size == 3

    def test_unknown_keys_are_ignored_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="escpos_encoder"):
            cfg = EncoderConfig.from_mapping({"printer": "TM-T88", "fallback_char": "?"})
        assert cfg == EncoderConfig()
        assert "printer" in caplog.text

    def test_to_dict_feeds_back(self) -> None:
        cfg = EncoderConfig(default_qr_error_level="l")  # type: ignore[arg-type]
        assert EncoderConfig.from_mapping(cfg.to_dict()) == cfg
