""" Command-line entry point: fetch the running configuration from one
    or more hosts and print it to standard output.
"""

import argparse
import getpass
import logging
import sys

import paramiko

from . import client
from . import config
from .protocol.errors import ProtocolError
from .transport.base import TransportError


def arguments(args=None):

    parser = argparse.ArgumentParser(description='Fetch the running configuration from NETCONF devices over SSH.')

    parser.add_argument('hosts', nargs='+', metavar='host', help='Device to connect to.')
    parser.add_argument('-u', '--username', default=None, help='Login username [default: profile, then the local user].')
    parser.add_argument('-p', '--password', default=None, help='Login password; keys and the SSH agent are tried when omitted.')
    parser.add_argument('-P', '--port', type=int, default=None, help='NETCONF port [default: profile, then %d].' % (config.port))
    parser.add_argument('-s', '--strict', action='store_true', default=None, help='Treat warnings reported by the device as failures.')
    parser.add_argument('-d', '--datastore', default='running', help='Datastore to fetch [default: %(default)s].')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='Log more; repeat for debug output.')

    return parser.parse_args(args)



def fetch(host, parsed):
    """ Fetch the configuration for a single *host*, applying any profile
        defaults for arguments not given on the command line.
    """

    profile = config.profile(host)

    username = parsed.username
    if username is None:
        username = profile.get('username', getpass.getuser())

    port = parsed.port
    if port is None:
        port = profile.get('port', config.default_port())

    strict = parsed.strict
    if strict is None:
        strict = profile.get('strict', False)

    with client.connect(host, int(port), username, parsed.password, strict=bool(strict)) as connection:
        return connection.get_config(parsed.datastore)



def main(args=None):

    parsed = arguments(args)

    if parsed.verbose > 1:
        level = logging.DEBUG
    elif parsed.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    status = 0

    for host in parsed.hosts:
        try:
            data = fetch(host, parsed)
        except (TransportError, ProtocolError, paramiko.SSHException, OSError, ValueError) as e:
            sys.stderr.write('%s: %s\n' % (host, str(e)))
            status = 1
            continue

        sys.stdout.write(data.decode('utf-8'))
        sys.stdout.write('\n')
        sys.stdout.flush()

    return status


if __name__ == '__main__':
    sys.exit(main())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
