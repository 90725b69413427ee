"""
scratch bootstrap — create a config file from handle + password.

  scratch bootstrap            write ~/.kilobytetools/config.json
  scratch bootstrap --stdout   print the config instead

The password is only sent to the control plane; it is never written.
"""

import getpass
import json
import sys

import requests

from scratch import api, config
from scratch.config import OptionsError
from scratch.format import green


def cmd_bootstrap(args):
    to_stdout = getattr(args, 'stdout', False)
    if not to_stdout and config.exists():
        raise OptionsError(f'error: existing config file found at {config.CONFIG_FILE}')

    handle, password = _prompt()
    result = api.bootstrap(requests.Session(), handle, password)
    cfg = config.template(result.api_key, result.dataplane_endpoint)

    if to_stdout:
        print(json.dumps(cfg, indent=2))
        return

    try:
        config.save(cfg)
    except OSError as e:
        raise OptionsError(f'could not write {config.CONFIG_FILE}: {e}') from e
    print(f'{green("✓", stream=sys.stderr)} config saved to {config.CONFIG_FILE}',
          file=sys.stderr)


def _prompt():
    try:
        handle = input('Enter your handle: ').strip()
        password = getpass.getpass('Enter your password: ')
    except (KeyboardInterrupt, EOFError):
        print(file=sys.stderr)
        sys.exit(1)
    return handle, password
