from book_pager.framework import Pass, registry


def test_registry_is_mapping():
    reg = registry()
    assert isinstance(reg, dict)


def test_registry_expected_keys_subset():
    expected = {"normalize_newlines", "paginate", "page_report"}
    assert expected <= registry().keys()


def test_registered_objects_satisfy_pass_protocol():
    assert all(isinstance(p, Pass) for p in registry().values())
    assert all(name == p.name for name, p in registry().items())
