#!/usr/bin/env python3
"""
scratch — easily transmit small bits of short-lived data.

  scratch push < file        upload, prints the new id
  scratch pull [ID]          download (defaults to the latest push)
  scratch ls                 list file metadata
  scratch rm ID              delete a file
  scratch stats              account usage
  scratch bootstrap          create a config file
"""

import argparse
import logging
import sys

import argcomplete

from scratch import api, validate
from scratch.api.formats import ALIASES
from scratch.config import CONFIG_FILE, OptionsError
from scratch.format import err

EPILOG = f"""
config:
  {CONFIG_FILE}
  Flags override config values. Run `scratch bootstrap` to create one.

examples:
  scratch push --lifetime 2h < ~/.ssh/id_rsa.pub
  scratch push --burn --prefix creds.aws: --file ~/.aws/config
  scratch pull creds.aws:f0022e5a > config
  scratch pull --anon c869d7cc
  scratch rm c869d7cc
"""


def build_parser():
    from scratch import __version__

    parser = argparse.ArgumentParser(
        prog='scratch',
        description='Easily transmit small bits of short-lived data.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument('--version', '-V', action='version',
                        version=f'%(prog)s {__version__}')
    parser.add_argument('--api-key', default=None, metavar='API_KEY',
                        help='API key found in your account settings page')
    parser.add_argument('--endpoint', default=None, metavar='ENDPOINT',
                        help='Dataplane endpoint found in your account settings page')
    parser.add_argument('--out-format', type=validate.response_format, default=None,
                        metavar='FORMAT',
                        help=f'How responses are rendered: {", ".join(ALIASES)}')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log requests and responses to stderr')

    sub = parser.add_subparsers(dest='command', metavar='COMMAND')

    p_push = sub.add_parser(
        'push', help='Upload the contents of a file',
        description='Upload data. The id of the created file is printed as '
                    'soon as it exists. Pushing from stdin buffers the whole '
                    'input in memory.')
    source = p_push.add_mutually_exclusive_group()
    source.add_argument('--stdin', action='store_true',
                        help='Push data from stdin (default)')
    source.add_argument('--file', default=None, metavar='FILE',
                        help='Push the named file')
    p_push.add_argument('--lifetime', type=validate.lifetime, default=None,
                        help=r'How long the file should live, e.g. 10m. Format: \d+(h|m|s)')
    p_push.add_argument('--private', action=argparse.BooleanOptionalAction, default=None,
                        help='Only you can read the file')
    p_push.add_argument('--pw', type=validate.password, default=None, metavar='PASSWORD',
                        help='Password required to read the file. Format: [a-zA-Z0-9._-]{1,20}')
    p_push.add_argument('--burn', action=argparse.BooleanOptionalAction, default=None,
                        help='Delete the file the first time it is read')
    p_push.add_argument('--prefix', type=validate.prefix, default=None,
                        help='Prefix for the random file id. Format: [a-zA-Z0-9._-:|]{1,64}')
    p_push.add_argument('--url', action='store_true',
                        help='Print the full file URL instead of the bare id')

    p_pull = sub.add_parser(
        'pull', help='Get the contents of a file',
        description='Pull a file by id. Files pushed with a password need it '
                    'to be pulled.')
    p_pull.add_argument('id', nargs='?', default=None, metavar='ID',
                        help='File id, including any prefix. Default: most recent push')
    p_pull.add_argument('--anon', action=argparse.BooleanOptionalAction, default=False,
                        help='Pull without credentials (public files only)')
    p_pull.add_argument('--pw', default=None, metavar='PW',
                        help='Password the file was pushed with, if any')
    p_pull.add_argument('--output', '-o', default=None, metavar='FILE',
                        help='Write to FILE instead of stdout')

    sub.add_parser('ls', help='List all file metadata')

    p_rm = sub.add_parser('rm', help='Remove a file by id')
    p_rm.add_argument('id', metavar='ID',
                      help='File id, including any prefix. No password needed')

    sub.add_parser('stats', help='Get usage stats for your account')

    p_boot = sub.add_parser(
        'bootstrap', help='Create a valid config file',
        description=f'Create a minimal config file at {CONFIG_FILE}.')
    p_boot.add_argument('--stdout', action=argparse.BooleanOptionalAction, default=False,
                        help='Print the config instead of writing it')

    return parser


def _configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv=None):
    from scratch.commands.manage import cmd_ls, cmd_rm, cmd_stats
    from scratch.commands.pull import cmd_pull
    from scratch.commands.push import cmd_push
    from scratch.commands.setup import cmd_bootstrap

    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    commands = {
        'push':      cmd_push,
        'pull':      cmd_pull,
        'ls':        cmd_ls,
        'rm':        cmd_rm,
        'stats':     cmd_stats,
        'bootstrap': cmd_bootstrap,
    }

    if args.command not in commands:
        parser.print_help()
        return

    try:
        commands[args.command](args)
    except (OptionsError, api.ApiError) as e:
        err(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(130)


if __name__ == '__main__':
    main()
