import pytest

from solswaps.substreams_models import (
    BlockRef,
    Input,
    KindMap,
    KindStore,
    MapInput,
    Module,
    Modules,
    Package,
    StoreInput,
    StoreMode,
    UpdatePolicy,
)


@pytest.mark.parametrize("policy", list(UpdatePolicy))
def test_update_policy_name_round_trip(policy):
    assert UpdatePolicy.from_str_name(policy.as_str_name()) is policy


def test_update_policy_schema_name():
    assert UpdatePolicy.SET_IF_NOT_EXISTS.as_str_name() == "UPDATE_POLICY_SET_IF_NOT_EXISTS"


def test_update_policy_unknown_names():
    assert UpdatePolicy.from_str_name("SET") is None
    assert UpdatePolicy.from_str_name("update_policy_set") is None


def test_update_policy_values_are_contiguous():
    assert [int(policy) for policy in UpdatePolicy] == list(range(len(UpdatePolicy)))
    assert UpdatePolicy(0) is UpdatePolicy.UNSET


@pytest.mark.parametrize("mode", list(StoreMode))
def test_store_mode_name_round_trip(mode):
    assert StoreMode.from_str_name(mode.as_str_name()) is mode


def test_store_mode_schema_name():
    assert StoreMode.DELTAS.as_str_name() == "DELTAS"
    assert StoreMode.from_str_name("deltas") is None


def test_module_defaults_are_independent():
    first = Module()
    first.inputs.append(Input(MapInput("block_to_pairs")))
    assert Module().inputs == []
    assert Module().kind is None


def test_store_kind_defaults_to_unset_policy():
    assert KindStore().update_policy is UpdatePolicy.UNSET
    module = Module(name="store_pairs", kind=KindStore(update_policy=UpdatePolicy.ADD))
    assert module.kind == KindStore(update_policy=UpdatePolicy.ADD, value_type="")
    assert module.kind != KindMap()


def test_input_equality_depends_on_variant():
    assert Input(StoreInput("pairs", StoreMode.GET)) == Input(StoreInput("pairs", StoreMode.GET))
    assert Input(StoreInput("pairs", StoreMode.GET)) != Input(StoreInput("pairs", StoreMode.DELTAS))
    assert Input(MapInput("pairs")) != Input(StoreInput("pairs"))


def test_package_holds_modules():
    package = Package(modules=Modules(modules=[Module(name="map_pools_created")]))
    assert [module.name for module in package.modules.modules] == ["map_pools_created"]
    assert Package().modules is None
    assert Package().network == ""


def test_block_ref_equality():
    assert BlockRef("abc", 5) == BlockRef(id="abc", number=5)
    assert BlockRef("abc", 5) != BlockRef("abc", 6)