import os

import pytest

import nconf


def test_default_port(home, monkeypatch):

    assert nconf.config.default_port() == 830

    monkeypatch.setenv('NCONF_PORT', '2022')
    assert nconf.config.default_port() == 2022

    monkeypatch.setenv('NCONF_PORT', 'ssh')
    with pytest.raises(ValueError):
        nconf.config.default_port()


def test_directory(home, monkeypatch):

    assert nconf.config.directory() == str(home)

    monkeypatch.delenv('NCONF_HOME')
    assert nconf.config.directory() == os.path.join(os.path.expanduser('~'), '.nconf')


def test_profile(home):

    assert nconf.config.profile('router') == dict()

    hosts = home / 'hosts'
    hosts.mkdir()
    (hosts / 'router.json').write_bytes(nconf.json.dumps({'username': 'admin', 'port': 2022, 'strict': True, 'password': 'nope'}))

    profile = nconf.config.profile('router')
    assert profile == {'username': 'admin', 'port': 2022, 'strict': True}


def test_bad_profile(home):

    hosts = home / 'hosts'
    hosts.mkdir()

    (hosts / 'broken.json').write_bytes(b'{"username": ')
    with pytest.raises(ValueError):
        nconf.config.profile('broken')

    (hosts / 'list.json').write_bytes(b'["admin"]')
    with pytest.raises(ValueError):
        nconf.config.profile('list')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
