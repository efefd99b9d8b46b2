"""Tests for ScanConfig.

Validates defaults, immutability, validation and from_dict().
"""

import pytest

from modeline import DEFAULT_SCAN_CONFIG, ScanConfig


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config scans both edges, five lines each."""
        config = ScanConfig()
        assert config.scan_top is True
        assert config.scan_bottom is True
        assert config.max_lines == 5

    def test_module_default(self) -> None:
        assert DEFAULT_SCAN_CONFIG == ScanConfig(scan_top=True, scan_bottom=True, max_lines=5)

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.max_lines = 10  # type: ignore[misc]

    def test_custom_values(self) -> None:
        config = ScanConfig(scan_top=False, max_lines=20)
        assert config.scan_top is False
        assert config.scan_bottom is True  # Still default
        assert config.max_lines == 20

    def test_hashable(self) -> None:
        assert len({ScanConfig(), ScanConfig(), ScanConfig(max_lines=2)}) == 2


class TestScanConfigValidation:
    """max_lines must be a positive int."""

    @pytest.mark.parametrize("value", [0, -1, -100])
    def test_non_positive_rejected(self, value: int) -> None:
        with pytest.raises(ValueError, match="positive"):
            ScanConfig(max_lines=value)

    @pytest.mark.parametrize("value", [1.5, "5", None, True])
    def test_non_int_rejected(self, value: object) -> None:
        with pytest.raises(ValueError, match="int"):
            ScanConfig(max_lines=value)  # type: ignore[arg-type]

    def test_both_edges_off_is_valid(self) -> None:
        config = ScanConfig(scan_top=False, scan_bottom=False)
        assert config.enabled is False


class TestScanConfigProperties:
    @pytest.mark.parametrize(
        ("top", "bottom", "enabled", "top_only"),
        [
            (True, True, True, False),
            (True, False, True, True),
            (False, True, True, False),
            (False, False, False, False),
        ],
    )
    def test_flags(self, top: bool, bottom: bool, enabled: bool, top_only: bool) -> None:
        config = ScanConfig(scan_top=top, scan_bottom=bottom)
        assert config.enabled is enabled
        assert config.top_only is top_only


class TestScanConfigFromDict:
    """Test ScanConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = ScanConfig.from_dict({"scan_bottom": False, "max_lines": 3})
        assert config.scan_bottom is False
        assert config.max_lines == 3
        assert config.scan_top is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"max_lines": 2, "unknown_key": "ignored"})
        assert config.max_lines == 2

    def test_from_dict_empty(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()

    def test_from_dict_validates(self) -> None:
        with pytest.raises(ValueError):
            ScanConfig.from_dict({"max_lines": 0})
