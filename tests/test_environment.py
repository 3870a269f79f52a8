import os

import pytest

from jshell.environment import Environment


@pytest.fixture
def env():
    return Environment(["HOME=/home/user", "PATH=/bin:/usr/bin", "SHELL=/bin/sh"])


def test_entries_keep_order(env):
    assert env.entries() == ["HOME=/home/user", "PATH=/bin:/usr/bin", "SHELL=/bin/sh"]
    assert len(env) == 3


def test_entries_returns_copy(env):
    listing = env.entries()
    listing.clear()
    assert len(env) == 3


def test_get_existing_and_missing(env):
    assert env.get("PATH") == "/bin:/usr/bin"
    assert env.get("MISSING") is None


def test_get_requires_whole_name(env):
    assert env.get("HOM") is None
    assert env.get("PATHX") is None


def test_export_new_assignment_appends(env):
    entry = env.export("EDITOR=vi")
    assert entry == "EDITOR=vi"
    assert env.entries()[-1] == "EDITOR=vi"
    assert len(env) == 4


def test_export_replaces_in_place(env):
    env.export("PATH=/opt/bin")
    assert env.entries()[1] == "PATH=/opt/bin"
    assert env.get("PATH") == "/opt/bin"
    assert len(env) == 3


def test_export_bare_name_gets_empty_quotes(env):
    entry = env.export("EMPTY")
    assert entry == "EMPTY=''"
    assert env.get("EMPTY") == "''"


def test_export_bare_existing_name_is_unchanged(env):
    entry = env.export("HOME")
    assert entry == "HOME=/home/user"
    assert env.get("HOME") == "/home/user"
    assert len(env) == 3


def test_export_value_with_equals(env):
    env.export("OPTS=a=b")
    assert env.get("OPTS") == "a=b"


def test_export_prefix_name_does_not_replace(env):
    env.export("HOM=x")
    assert env.get("HOME") == "/home/user"
    assert env.get("HOM") == "x"
    assert len(env) == 4


def test_unset_removes(env):
    assert env.unset("PATH") is True
    assert env.get("PATH") is None
    assert env.entries() == ["HOME=/home/user", "SHELL=/bin/sh"]


def test_unset_missing_returns_false(env):
    assert env.unset("NOPE") is False
    assert len(env) == 3


def test_unset_only_entry_leaves_empty():
    env = Environment(["ONLY=1"])
    assert env.unset("ONLY") is True
    assert len(env) == 0
    assert env.entries() == []


def test_unset_removes_first_definition_only():
    env = Environment(["A=1", "A=2"])
    assert env.unset("A") is True
    assert env.entries() == ["A=2"]


def test_sorted_entries_order():
    env = Environment(["b=2", "A=1", "AB=3", "a=4"])
    result = env.sorted_entries()
    assert result == ["A=1", "AB=3", "a=4", "b=2"]
    assert env.entries() == ["b=2", "A=1", "AB=3", "a=4"]


def test_as_dict_first_wins():
    env = Environment(["X=1", "Y=2", "X=3"])
    assert env.as_dict() == {"X": "1", "Y": "2"}


def test_init_from_mapping():
    env = Environment({"K": "v", "L": "w"})
    assert env.entries() == ["K=v", "L=w"]
    assert env.as_dict() == {"K": "v", "L": "w"}


def test_init_defaults_to_process_environment():
    env = Environment()
    assert env.as_dict() == dict(os.environ)


def test_export_then_unset_round_trip(env):
    before = env.entries()
    env.export("TEMP=1")
    env.unset("TEMP")
    assert env.entries() == before