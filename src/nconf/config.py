""" Defaults and host profiles. A profile is a small JSON file kept in
    the configuration directory, one per host, providing defaults for the
    command line: the username, port, and whether warnings are fatal.
"""

import os

from . import json


port = 830
subsystem = 'netconf'
read_size = 4096

profile_keys = set(('username', 'port', 'strict'))


def default_port():
    """ Return the default NETCONF port, honoring the NCONF_PORT
        environment variable if it is set.
    """

    value = os.environ.get('NCONF_PORT')

    if value is None or value == '':
        return port

    try:
        return int(value)
    except ValueError:
        raise ValueError('NCONF_PORT is not an integer: ' + repr(value))



def directory():
    """ Return the directory containing nconf configuration files. The
        NCONF_HOME environment variable takes precedence; otherwise it is
        ~/.nconf. The directory is not required to exist.
    """

    home = os.environ.get('NCONF_HOME')

    if home:
        return home

    return os.path.join(os.path.expanduser('~'), '.nconf')



def profile(host):
    """ Return the profile for *host* as a dictionary. An empty dictionary
        is returned if there is no profile; a profile that cannot be parsed
        raises ValueError. Unknown keys are ignored.
    """

    filename = os.path.join(directory(), 'hosts', host + '.json')

    try:
        with open(filename, 'rb') as handle:
            contents = handle.read()
    except FileNotFoundError:
        return dict()

    try:
        loaded = json.loads(contents)
    except ValueError as e:
        raise ValueError('cannot parse profile %s: %s' % (filename, str(e)))

    if not isinstance(loaded, dict):
        raise ValueError('profile %s is not a JSON object' % (filename))

    selected = dict()
    for key,value in loaded.items():
        if key in profile_keys:
            selected[key] = value

    return selected


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
