from argparse import Namespace

import pytest

from optkit import (
    BoolOption,
    DuplicateOptionError,
    IntOption,
    OptionDefinitionError,
    OptionRegistry,
    StrOption,
    UIntOption,
)


@pytest.fixture
def options():
    return (
        BoolOption("-i", "--is"),
        IntOption("-j", "--js", default=1100),
        UIntOption("--ks", default=2200),
        StrOption("-l", "--ls", default="Blah"),
    )


def test_add_is_chainable(options):
    registry = OptionRegistry()
    result = registry.add(options[0]).add(options[1])
    assert result is registry
    assert len(registry) == 2


def test_lookup(options):
    registry = OptionRegistry(options)
    is_, js, ks, ls = options
    assert registry.find_by_short("i") is is_
    assert registry.find_by_short("l") is ls
    assert registry.find_by_long("ks") is ks
    assert registry.find_by_long("js") is js
    assert registry.find_by_short("k") is None
    assert registry.find_by_long("bogus") is None
    assert registry.find_by_long("") is None


def test_iteration_order(options):
    registry = OptionRegistry(options)
    assert list(registry) == list(options)
    assert options[2] in registry
    assert BoolOption("--other") not in registry


def test_duplicate_short_rejected():
    registry = OptionRegistry([BoolOption("-a", "--alpha")])
    with pytest.raises(DuplicateOptionError, match="'-a' is already used by option 'alpha'"):
        registry.add(BoolOption("-a", "--another"))
    assert len(registry) == 1


def test_duplicate_long_rejected():
    registry = OptionRegistry([BoolOption("-a", "--alpha")])
    with pytest.raises(DuplicateOptionError, match="'--alpha'"):
        registry.add(IntOption("-b", "--alpha"))


def test_duplicate_dest_rejected():
    registry = OptionRegistry([BoolOption("--dry-run")])
    with pytest.raises(DuplicateOptionError, match="Destination 'dry_run'"):
        registry.add(BoolOption("--dry_run"))


def test_same_option_twice_rejected():
    option = BoolOption("-a")
    registry = OptionRegistry([option])
    with pytest.raises(DuplicateOptionError):
        registry.add(option)
    assert isinstance(DuplicateOptionError("x"), OptionDefinitionError)


def test_add_non_option():
    with pytest.raises(OptionDefinitionError):
        OptionRegistry().add("--flag")


def test_export(options):
    registry = OptionRegistry(options)
    options[1].apply(True, "7")
    assert registry.as_dict() == {"is": False, "js": 7, "ks": 2200, "ls": "Blah"}
    namespace = registry.to_namespace()
    assert isinstance(namespace, Namespace)
    assert namespace.js == 7
    assert getattr(namespace, "is") is False
    assert registry.get("ks") is options[2]
    assert registry.get("missing") is None


def test_reset(options):
    registry = OptionRegistry(options)
    for option in options:
        option.set_present()
    options[3].apply(True, "x")
    registry.reset()
    assert not any(option.present for option in registry)
    assert options[3].value == "Blah"


def test_str(options):
    registry = OptionRegistry(options)
    assert str(registry) == "OptionRegistry(options=4, short=3, long=4)"
