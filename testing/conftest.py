import matplotlib

matplotlib.use("Agg")

import pytest

from boltcheck import BoltConfiguration, EntityStore, GlobalLoads, Member


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def bolt_config() -> BoltConfiguration:
    """2 x 7 pattern of 7/8 in A325-X bolts (form defaults)."""
    return BoltConfiguration(
        n_rows=2,
        n_columns=7,
        row_spacing=3.0,
        column_spacing=3.0,
        edge_distance_vertical=2.0,
        edge_distance_horizontal=1.5,
        bolt_diameter=0.875,
        bolt_grade="A325-X",
    )


@pytest.fixture
def populated_store(store: EntityStore, bolt_config: BoltConfiguration) -> dict:
    """W21X83 beam bolted to a 1/2 in plate under a 150 kip direct load."""
    ids = {
        "member_a": store.add_member(Member.steel_section("W21X83", role="BEAM")),
        "member_b": store.add_member(Member.plate(thickness=0.5)),
        "bolts": store.add_bolt_configuration(bolt_config),
        "loads": store.add_global_loads(GlobalLoads(direct_load=150.0)),
    }
    ids["connection"] = store.add_connection(
        ids["member_a"], ids["member_b"], ids["bolts"], ids["loads"]
    )
    ids["store"] = store
    return ids
