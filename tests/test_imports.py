def test_import_sebp_package() -> None:
    import importlib

    module = importlib.import_module("sebp")
    assert module is not None


def test_import_registry_tables_no_side_effects() -> None:
    from sebp.domain.schema import BLOCK_REGISTRY, GRID_REGISTRY

    assert "SubtypeName" in BLOCK_REGISTRY
    assert "CubeBlocks" not in GRID_REGISTRY
    assert GRID_REGISTRY.is_known("CubeBlocks")
