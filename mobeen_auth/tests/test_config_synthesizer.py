"""
Tests for generated config synthesis and the atomic writer behind it.
"""

from __future__ import annotations

import json
import os
import stat

import pytest

from mobeen_auth.config import DEFAULT_TSCONFIG
from mobeen_auth.config_synthesizer import ConfigSynthesizer, SynthesisOutcome
from mobeen_auth.merger import AtomicWriteError, AtomicWriter


class TestConfigSynthesizer:
    """Tests for ConfigSynthesizer."""

    def test_creates_missing_config(self, tmp_path):
        """Test the default document is written when the file is absent."""
        path = tmp_path / "tsconfig.json"

        outcome = ConfigSynthesizer().ensure(path, DEFAULT_TSCONFIG)

        assert outcome is SynthesisOutcome.CREATED
        assert json.loads(path.read_text()) == DEFAULT_TSCONFIG

    def test_output_format(self, tmp_path):
        """Test two-space indentation and a trailing newline."""
        path = tmp_path / "tsconfig.json"

        ConfigSynthesizer().ensure(path, {"include": ["a"]})

        assert path.read_text() == '{\n  "include": [\n    "a"\n  ]\n}\n'

    def test_existing_config_untouched(self, tmp_path):
        """Test an existing file is never rewritten, even if not valid JSON."""
        path = tmp_path / "tsconfig.json"
        path.write_text("// not json at all {")

        outcome = ConfigSynthesizer().ensure(path, DEFAULT_TSCONFIG)

        assert outcome is SynthesisOutcome.ALREADY_PRESENT
        assert path.read_text() == "// not json at all {"

    def test_second_call_is_noop(self, tmp_path):
        """Test synthesis happens at most once."""
        path = tmp_path / "tsconfig.json"
        synthesizer = ConfigSynthesizer()

        assert synthesizer.ensure(path, {"a": 1}) is SynthesisOutcome.CREATED
        assert synthesizer.ensure(path, {"b": 2}) is SynthesisOutcome.ALREADY_PRESENT
        assert json.loads(path.read_text()) == {"a": 1}

    def test_logs_outcome(self, tmp_path, caplog):
        """Test both outcomes are logged."""
        path = tmp_path / "tsconfig.json"
        synthesizer = ConfigSynthesizer(display_root=tmp_path)

        with caplog.at_level("INFO", logger="mobeen_auth"):
            synthesizer.ensure(path, {})
            synthesizer.ensure(path, {})

        assert "Created tsconfig.json" in caplog.messages
        assert "tsconfig.json already exists, skipping" in caplog.messages


class TestAtomicWriter:
    """Tests for AtomicWriter."""

    def test_write_creates_parent_directories(self, tmp_path):
        """Test parents are created and no temp file is left behind."""
        path = tmp_path / "nested" / "config.json"

        AtomicWriter().write(path, '{"a": 1}')

        assert path.read_text() == '{"a": 1}'
        assert list(path.parent.iterdir()) == [path]

    def test_invalid_json_rejected(self, tmp_path):
        """Test invalid JSON is not written and the temp file is removed."""
        path = tmp_path / "config.json"

        with pytest.raises(AtomicWriteError):
            AtomicWriter().write(path, "{broken")

        assert not path.exists()
        assert list(tmp_path.iterdir()) == []

    def test_non_object_rejected(self, tmp_path):
        """Test a JSON document that is not an object is rejected."""
        with pytest.raises(AtomicWriteError):
            AtomicWriter().write(tmp_path / "config.json", "[1, 2]")

    def test_file_mode_matches_regular_files(self, tmp_path):
        """Test the written file gets the umask mode, not the temp file's 0600."""
        reference = tmp_path / "reference.json"
        path = tmp_path / "tsconfig.json"

        old_umask = os.umask(0o022)
        try:
            reference.write_text("{}")
            AtomicWriter().write(path, "{}")
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE(path.stat().st_mode) == stat.S_IMODE(reference.stat().st_mode) == 0o644

    def test_synthesized_config_is_readable_by_group_and_others(self, tmp_path):
        """Test tsconfig.json is not created owner-only."""
        path = tmp_path / "tsconfig.json"

        old_umask = os.umask(0o022)
        try:
            ConfigSynthesizer().ensure(path, DEFAULT_TSCONFIG)
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE(path.stat().st_mode) == 0o644
