"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and produce sensible output. Uses
Click's CliRunner so nothing touches the real config directory.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from chromatune.cli.main import cli


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Chromatune' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", ["process", "classify", "convert", "gradient", "presets", "config"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestCommands:
    """Test command behavior."""

    def test_process_text(self, runner, tmp_path: Path):
        result = runner.invoke(cli, [
            'process',
            '-c', 'VIBRANT=#89b4fa',
            '-c', 'PROMINENT=#cba6f7',
            '--energy', '0.8', '--valence', '0.85', '--danceability', '0.9',
            '--config', str(tmp_path / 'config.json'),
        ])
        assert result.exit_code == 0, result.output
        assert 'Accent:' in result.output
        assert 'emotion-primary' in result.output
        assert 'Emotion:   energetic (intensity' in result.output
        assert 'VIBRANT' in result.output

    def test_process_json(self, runner, tmp_path: Path):
        result = runner.invoke(cli, [
            'process', '-c', 'VIBRANT=#89b4fa',
            '--config', str(tmp_path / 'config.json'),
            '--json',
        ])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data['strategy'] == 'fallback'
        assert set(data['enhanced_colors']) == {'VIBRANT'}

    def test_process_variables(self, runner, tmp_path: Path):
        result = runner.invoke(cli, [
            'process', '-c', 'VIBRANT=#89b4fa', '-e', '0.5', '-V', '0.5',
            '--config', str(tmp_path / 'config.json'),
            '--variables',
        ])
        assert result.exit_code == 0
        assert '--sn-vibrant-enhanced' in result.output

    def test_process_rejects_malformed_color(self, runner):
        result = runner.invoke(cli, ['process', '-c', 'no-equals-sign'])
        assert result.exit_code == 2
        assert 'KEY=#hex' in result.output

    def test_process_rejects_out_of_range_feature(self, runner):
        result = runner.invoke(cli, ['process', '--energy', '1.5'])
        assert result.exit_code == 2

    def test_process_bad_config_file(self, runner, tmp_path: Path):
        config_path = tmp_path / 'config.json'
        config_path.write_text('{ broken', encoding='utf-8')
        result = runner.invoke(cli, ['process', '--config', str(config_path)])
        assert result.exit_code == 1
        assert 'ERROR' in result.output

    def test_classify(self, runner):
        result = runner.invoke(cli, ['classify', '--energy', '0.9', '--valence', '0.9', '--danceability', '0.9'])
        assert result.exit_code == 0
        assert 'Primary:     energetic' in result.output
        assert 'Secondary:   epic' in result.output

    def test_classify_json(self, runner):
        result = runner.invoke(cli, ['classify', '-e', '0.05', '-V', '0.05', '--json'])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data['secondary'] == 'ambient'

    def test_convert(self, runner):
        result = runner.invoke(cli, ['convert', '#ff0000'])
        assert result.exit_code == 0
        assert 'RGB:   255,0,0' in result.output
        assert 'OKLAB: L=0.6280' in result.output

    def test_convert_invalid(self, runner):
        result = runner.invoke(cli, ['convert', 'red'])
        assert result.exit_code == 1
        assert 'Invalid hex color' in result.output

    def test_gradient(self, runner):
        result = runner.invoke(cli, ['gradient', '#89b4fa', '#f38ba8', '--steps', '3', '--preset', 'subtle'])
        assert result.exit_code == 0
        assert result.output.count('shadow') == 3

    def test_gradient_invalid_endpoint(self, runner):
        result = runner.invoke(cli, ['gradient', '#89b4fa', 'pink'])
        assert result.exit_code == 1

    def test_presets(self, runner):
        result = runner.invoke(cli, ['presets'])
        assert result.exit_code == 0
        for name in ('SUBTLE', 'STANDARD', 'VIBRANT', 'COSMIC'):
            assert name in result.output

    def test_config_init_and_show(self, runner, tmp_path: Path):
        config_path = tmp_path / 'chromatune' / 'config.json'

        result = runner.invoke(cli, ['config', 'init', '--path', str(config_path)])
        assert result.exit_code == 0
        assert config_path.exists()

        result = runner.invoke(cli, ['config', 'init', '--path', str(config_path)])
        assert result.exit_code == 1

        result = runner.invoke(cli, ['config', 'init', '--path', str(config_path), '--force'])
        assert result.exit_code == 0
        assert config_path.with_suffix('.json.bak').exists()

        result = runner.invoke(cli, ['config', 'show', '--path', str(config_path)])
        assert result.exit_code == 0
        assert 'cache_capacity: 20' in result.output

    def test_config_show_defaults(self, runner, tmp_path: Path):
        result = runner.invoke(cli, ['config', 'show', '--path', str(tmp_path / 'none.json')])
        assert result.exit_code == 0
        assert 'defaults' in result.output
