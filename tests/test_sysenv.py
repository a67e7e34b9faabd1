import pytest

from sdkvm.sysenv import EnvironmentStore, EnvType, RegistryError


class FailingRegistry(dict):
    def __getitem__(self, key):
        raise RegistryError("unreadable")

    def __contains__(self, key):
        raise RegistryError("unreadable")


@pytest.fixture
def store():
    return EnvironmentStore(EnvType.USER, registry={"PATH": "a;b", "HOME": "/home/me"})


def test_set_then_get_round_trip(store):
    store.set("JAVA_HOME", "/opt/link/jdk")
    assert store.get("JAVA_HOME") == "/opt/link/jdk"


def test_get_missing_is_none(store):
    assert store.get("MISSING") is None


def test_contains(store):
    assert store.contains("PATH") is True
    assert store.contains("MISSING") is False


def test_items_lists_all_pairs(store):
    assert sorted(store.items()) == [("HOME", "/home/me"), ("PATH", "a;b")]


def test_delete_removes_variable(store):
    store.delete("HOME")
    assert store.contains("HOME") is False


def test_delete_missing_raises(store):
    with pytest.raises(KeyError):
        store.delete("MISSING")


def test_rename_moves_value(store):
    store.rename("HOME", "USERHOME")
    assert store.get("USERHOME") == "/home/me"
    assert store.contains("HOME") is False


def test_rename_missing_raises(store):
    with pytest.raises(KeyError):
        store.rename("MISSING", "OTHER")


def test_rename_onto_existing_raises(store):
    with pytest.raises(RegistryError):
        store.rename("HOME", "PATH")
    assert store.get("HOME") == "/home/me"


def test_replace_returns_old_value(store):
    assert store.replace("PATH", "c") == "a;b"
    assert store.get("PATH") == "c"


def test_replace_new_key_returns_none(store):
    assert store.replace("NEW", "v") is None
    assert store.get("NEW") == "v"


def test_append_concatenates_and_returns_old(store):
    assert store.append("PATH", ";c") == "a;b"
    assert store.get("PATH") == "a;b;c"


def test_append_to_missing_sets_value(store):
    assert store.append("NEW", "x") is None
    assert store.get("NEW") == "x"


def test_unreadable_registry_reads_as_missing():
    failing = EnvironmentStore(EnvType.SYSTEM, registry=FailingRegistry())
    assert failing.get("PATH") is None
    assert failing.contains("PATH") is False