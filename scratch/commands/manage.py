"""
Account commands: ls, rm, stats.

Each prints the server's response text as-is (trimmed); use --out-format
to choose between plain text and javascript.
"""

import requests

from scratch import api, options
from scratch.format import render


def cmd_ls(args):
    opts = options.resolve(args)
    render(api.list_files(opts.endpoint, requests.Session(), opts.api_key,
                          fmt=opts.fmt))


def cmd_rm(args):
    opts = options.resolve(args)
    render(api.delete(opts.endpoint, requests.Session(), opts.api_key,
                      args.id, fmt=opts.fmt))


def cmd_stats(args):
    opts = options.resolve(args)
    render(api.stats(opts.endpoint, requests.Session(), opts.api_key,
                     fmt=opts.fmt))
