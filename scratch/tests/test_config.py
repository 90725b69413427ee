"""
scratch/tests/test_config.py

Config file load/save and option resolution (flag > config > unset).
"""

import argparse
import json

import pytest

from scratch import config, options
from scratch.api import ResponseFormat
from scratch.config import OptionsError


# ── Config file ───────────────────────────────────────────────────────────────

class TestConfig:
    def test_load_missing_file_returns_empty_dict(self, tmp_path):
        assert config.load(tmp_path / 'nope.json') == {}

    def test_save_and_load_roundtrip(self, tmp_path):
        path = tmp_path / 'config.json'
        cfg = {'api_key': 'k', 'endpoint': 'https://x.io'}
        config.save(cfg, path)
        assert config.load(path) == cfg

    def test_save_creates_parent_directories(self, tmp_path):
        path = tmp_path / 'sub' / 'nested' / 'config.json'
        config.save({'api_key': 'k'}, path)
        assert path.exists()

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('api_key = "toml?"')
        with pytest.raises(OptionsError) as exc_info:
            config.load(path)
        assert str(exc_info.value).startswith(f'malformed config file at {path}')

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('[1, 2]')
        with pytest.raises(OptionsError):
            config.load(path)

    def test_exists_uses_default_path(self, isolated_config_file):
        assert not config.exists()
        config.save({})
        assert config.exists()

    def test_template(self):
        cfg = config.template('key-1', 'https://dp.x.io')
        assert cfg['api_key'] == 'key-1'
        assert cfg['endpoint'] == 'https://dp.x.io'
        assert cfg['response']['format'] == 'text/plain'
        assert cfg['scratch-push']['lifetime'] == '5m'


# ── Option resolution ─────────────────────────────────────────────────────────

def _args(command, **kwargs):
    defaults = {'api_key': None, 'endpoint': None, 'out_format': None}
    defaults.update(kwargs)
    return argparse.Namespace(command=command, **defaults)


class TestResolve:
    CFG = {
        'api_key': 'cfg-key',
        'endpoint': 'https://cfg.x.io',
        'response': {'format': 'js'},
        'scratch-push': {'lifetime': '5m', 'private': True, 'burn': False, 'prefix': 'cfg.'},
    }

    def test_config_fills_missing_flags(self):
        opts = options.resolve(_args('ls'), self.CFG)
        assert opts.api_key == 'cfg-key'
        assert opts.endpoint == 'https://cfg.x.io'
        assert opts.fmt is ResponseFormat.JAVASCRIPT

    def test_flags_override_config(self):
        args = _args('ls', api_key='flag-key', endpoint='https://flag.x.io',
                     out_format=ResponseFormat.PLAIN)
        opts = options.resolve(args, self.CFG)
        assert opts.api_key == 'flag-key'
        assert opts.endpoint == 'https://flag.x.io'
        assert opts.fmt is ResponseFormat.PLAIN

    def test_push_defaults_from_config(self):
        args = _args('push', lifetime=None, private=None, burn=None, prefix=None)
        opts = options.resolve(args, self.CFG)
        assert opts.lifetime == '5m'
        assert opts.private is True
        assert opts.burn is False
        assert opts.prefix == 'cfg.'

    def test_negated_flag_beats_config(self):
        args = _args('push', lifetime='1h', private=False, burn=None, prefix=None)
        opts = options.resolve(args, self.CFG)
        assert opts.lifetime == '1h'
        assert opts.private is False

    def test_push_defaults_ignored_for_other_commands(self):
        opts = options.resolve(_args('stats'), self.CFG)
        assert opts.lifetime is None

    def test_anon_pull_drops_configured_key(self):
        opts = options.resolve(_args('pull', anon=True), self.CFG)
        assert opts.api_key is None
        assert opts.endpoint == 'https://cfg.x.io'

    def test_anon_pull_does_not_need_key(self):
        opts = options.resolve(_args('pull', anon=True, endpoint='https://x.io'), {})
        assert opts.api_key is None

    def test_missing_api_key(self):
        with pytest.raises(OptionsError) as exc_info:
            options.resolve(_args('ls', endpoint='https://x.io'), {})
        assert str(exc_info.value) == (
            "missing required option '--api-key' or config setting 'api_key'")

    def test_missing_endpoint(self):
        with pytest.raises(OptionsError) as exc_info:
            options.resolve(_args('pull', api_key='k'), {})
        assert 'endpoint' in str(exc_info.value)

    def test_bootstrap_needs_nothing(self):
        opts = options.resolve(_args('bootstrap'), {})
        assert opts.api_key is None
        assert opts.endpoint is None

    def test_invalid_config_value(self):
        cfg = dict(self.CFG, **{'scratch-push': {'lifetime': 'forever'}})
        args = _args('push', lifetime=None, private=None, burn=None, prefix=None)
        with pytest.raises(OptionsError) as exc_info:
            options.resolve(args, cfg)
        assert 'lifetime was forever' in str(exc_info.value)

    def test_non_bool_flag_in_config(self):
        cfg = dict(self.CFG, **{'scratch-push': {'burn': 'yes'}})
        args = _args('push', lifetime=None, private=None, burn=None, prefix=None)
        with pytest.raises(OptionsError):
            options.resolve(args, cfg)

    def test_loads_default_config_file(self, isolated_config_file):
        isolated_config_file.write_text(json.dumps(self.CFG))
        opts = options.resolve(_args('ls'))
        assert opts.api_key == 'cfg-key'
