"""
Resolve the options a command runs with.

Every value comes from the first of:
  1. the command-line flag
  2. the config file (~/.kilobytetools/config.json)
  3. unset

Config values go through the same validators as flags, so a bad config
file fails the same way a bad flag would.
"""

from dataclasses import dataclass

from scratch import config, validate
from scratch.api.formats import ResponseFormat
from scratch.config import OptionsError

# Commands that don't need an api key / endpoint before they run.
_NO_CREDENTIALS = {'bootstrap'}


@dataclass
class Options:
    api_key: str | None = None
    endpoint: str | None = None
    fmt: ResponseFormat | None = None

    # push defaults
    lifetime: str | None = None
    private: bool | None = None
    burn: bool | None = None
    prefix: str | None = None


def resolve(args, cfg=None) -> Options:
    """
    Merge parsed args over the loaded config and check required values.
    Raises OptionsError for a malformed config or a missing requirement.
    """
    if cfg is None:
        cfg = config.load()

    response_cfg = config.section(cfg, config.RESPONSE_SECTION)
    push_cfg = config.section(cfg, config.PUSH_SECTION)

    opts = Options(
        api_key=_pick(args, 'api_key', cfg.get('api_key')),
        endpoint=_pick(args, 'endpoint', cfg.get('endpoint')),
        fmt=_pick(args, 'out_format',
                  _from_config(validate.response_format, response_cfg.get('format'))),
    )

    if args.command == 'push':
        opts.lifetime = _pick(args, 'lifetime',
                              _from_config(validate.lifetime, push_cfg.get('lifetime')))
        opts.prefix = _pick(args, 'prefix',
                            _from_config(validate.prefix, push_cfg.get('prefix')))
        opts.private = _pick(args, 'private', _flag(push_cfg, 'private'))
        opts.burn = _pick(args, 'burn', _flag(push_cfg, 'burn'))

    anon = args.command == 'pull' and bool(getattr(args, 'anon', False))
    if anon:
        # --anon never sends credentials, even configured ones.
        opts.api_key = None

    _require(opts, args.command, anon)
    return opts


def _pick(args, name, fallback):
    value = getattr(args, name, None)
    return fallback if value is None else value


def _from_config(validator, value):
    if value is None:
        return None
    try:
        return validator(value)
    except validate.MalformedArgument as e:
        raise OptionsError(f'malformed config file at {config.CONFIG_FILE}: {e}') from e


def _flag(table, name):
    value = table.get(name)
    if value is None or isinstance(value, bool):
        return value
    raise OptionsError(
        f'malformed config file at {config.CONFIG_FILE}: '
        f'{config.PUSH_SECTION}.{name} must be true or false'
    )


def _require(opts, command, anon):
    if command in _NO_CREDENTIALS:
        return
    if not opts.api_key and not anon:
        raise OptionsError(_missing('--api-key', 'api_key'))
    if not opts.endpoint:
        raise OptionsError(_missing('--endpoint', 'endpoint'))


def _missing(flag, setting):
    return f"missing required option '{flag}' or config setting '{setting}'"
