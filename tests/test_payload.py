"""
Unit Tests for payload processing, the transform script and logging setup.

Run:
    pytest tests/test_payload.py -v
"""

import sys
import os
import json
import logging
import importlib.util
from pathlib import Path

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest

from src.fft_core import ALGORITHMS, InvalidSampleError, process_payload
from src.fft_core.payload import UNKNOWN_ALGORITHM_PAYLOAD
from src.utils.logging import setup_logging, log_config

SCRIPT_PATH = Path(__file__).parent.parent / 'scripts' / 'run_transform.py'


def load_script():
    spec = importlib.util.spec_from_file_location('run_transform', SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestProcessPayload:
    """Test suite for selector-driven payload processing."""

    def test_selectors(self):
        assert ALGORITHMS == ('fft', 'inv', 'mgn')

    def test_fft(self):
        result = process_payload([1, 1, 1, 1])
        assert len(result) == 4
        assert result[0]['real'] == pytest.approx(2.0)
        assert result[0]['imag'] == pytest.approx(0.0)
        for pair in result[1:]:
            assert abs(pair['real']) < 1e-12 and abs(pair['imag']) < 1e-12

    def test_inv_restores_samples(self):
        samples = [0.5, -1.0, 2.0, 3.5, 0.0, 1.25]
        spectrum = process_payload(samples, algorithm='fft')
        restored = process_payload(spectrum, algorithm='inv')

        np.testing.assert_allclose([p['real'] for p in restored], samples, atol=1e-10)
        np.testing.assert_allclose([p['imag'] for p in restored], 0.0, atol=1e-10)

    def test_mgn(self):
        result = process_payload([1, 1, 1, 1], algorithm='mgn')
        assert result[0]['magnitude'] == pytest.approx(2.0)
        assert result[0]['phase'] == pytest.approx(0.0)
        assert set(result[1]) == {'magnitude', 'phase'}

    def test_mgn_radians(self):
        # Single sample: phase of -1 is pi
        result = process_payload([-1.0], algorithm='mgn', degrees=False)
        assert result[0]['phase'] == pytest.approx(np.pi)

    def test_float32(self):
        result = process_payload([1.0, 2.0, 3.0], algorithm='fft', dtype=np.float32)
        assert result[0]['real'] == pytest.approx(6.0 / np.sqrt(3), rel=1e-6)

    def test_empty_payload(self):
        for algorithm in ALGORITHMS:
            assert process_payload([], algorithm=algorithm) == []

    def test_inv_rejects_plain_samples(self):
        with pytest.raises(InvalidSampleError, match="Element 0"):
            process_payload([1.0, 2.0], algorithm='inv')

    def test_fft_rejects_complex_samples(self):
        with pytest.raises(InvalidSampleError):
            process_payload([1 + 2j, 3j], algorithm='fft')

    def test_unknown_selector(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = process_payload([1, 2, 3], algorithm='dct')
        assert result == UNKNOWN_ALGORITHM_PAYLOAD
        assert 'dct' in caplog.text


class TestRunTransformScript:
    """Test suite for scripts/run_transform.py."""

    def test_load_payload_inline(self):
        script = load_script()
        assert script.load_payload(None, "1, 2,3") == [1.0, 2.0, 3.0]

    def test_load_payload_files(self, tmp_path):
        script = load_script()
        json_file = tmp_path / 'samples.json'
        json_file.write_text(json.dumps([1, 2, 3]))
        yaml_file = tmp_path / 'spectrum.yaml'
        yaml_file.write_text("- {real: 1.0, imag: 0.0}\n- {real: 0.0, imag: 1.0}\n")

        assert script.load_payload(str(json_file), None) == [1, 2, 3]
        assert script.load_payload(str(yaml_file), None)[1] == {'real': 0.0, 'imag': 1.0}

    def test_load_payload_rejects_non_list(self, tmp_path):
        script = load_script()
        bad = tmp_path / 'bad.json'
        bad.write_text(json.dumps({'payload': [1, 2]}))
        with pytest.raises(ValueError):
            script.load_payload(str(bad), None)

    def test_missing_config(self, tmp_path):
        script = load_script()
        with pytest.raises(FileNotFoundError):
            script.load_config(str(tmp_path / 'missing.yaml'))

    def test_main_writes_output(self, tmp_path, monkeypatch):
        script = load_script()
        config = tmp_path / 'config.yaml'
        config.write_text("algorithm: mgn\ndtype: float64\nphase_degrees: true\n"
                          "logging:\n  file: " + str(tmp_path / 'run.log') + "\n  level: DEBUG\n")
        output = tmp_path / 'out' / 'result.json'

        monkeypatch.setattr(sys, 'argv', [
            'run_transform.py', '--values', '1,1,1,1',
            '--config', str(config), '--output', str(output),
        ])
        script.main()

        result = json.loads(output.read_text())
        assert result[0]['magnitude'] == pytest.approx(2.0)
        assert 'Loaded payload with 4 elements' in (tmp_path / 'run.log').read_text()


class TestLogging:
    """Test suite for logging utilities."""

    def test_setup_logging_file(self, tmp_path):
        log_file = tmp_path / 'logs' / 'fft.log'
        logger = setup_logging(log_file=str(log_file), level=logging.DEBUG, name='test_fft_logging')
        log_config(logger, {'algorithm': 'fft', 'nested': {'scale': 0.5}})

        for handler in logger.handlers:
            handler.flush()

        text = log_file.read_text()
        assert 'algorithm: fft' in text
        assert 'scale: 0.5000' in text

    def test_setup_logging_no_duplicate_handlers(self):
        setup_logging(name='test_fft_dupes')
        logger = setup_logging(name='test_fft_dupes')
        assert len(logger.handlers) == 1

    def test_file_handler_replaced_on_reconfigure(self, tmp_path):
        first = tmp_path / 'first.log'
        second = tmp_path / 'second.log'
        setup_logging(name='test_fft_reconfigure', log_file=str(first))
        logger = setup_logging(name='test_fft_reconfigure', log_file=str(second))
        logger.info("second run")

        assert len(logger.handlers) == 2
        assert 'second run' in second.read_text()
        assert 'second run' not in first.read_text()
