import pytest

from arenagame.font import (
    FONT_NAME,
    FONT_PATHS,
    FontId,
    FontLoadError,
    FontRegistry,
    font_spec,
)


class FakeBackend:
    def __init__(self, add_ok=True, remove_ok=True):
        self.add_ok = add_ok
        self.remove_ok = remove_ok
        self.added = []
        self.removed = []
        self.created = []
        self.deleted = []

    def add_font_resource(self, path):
        self.added.append(path)
        return self.add_ok

    def remove_font_resource(self, path):
        self.removed.append(path)
        return self.remove_ok

    def create_font(self, name, size, thick, type):
        self.created.append((name, size, thick, type))
        return 1000 + len(self.created)

    def delete_font(self, handle):
        self.deleted.append(handle)


def test_font_specs_follow_the_table():
    assert font_spec(FontId.SIZE100_4).size == 100
    assert font_spec(FontId.SIZE96_4).size == 96
    assert font_spec(FontId.SIZE64_4).size == 64
    assert font_spec(FontId.SIZE55_4).size == 55
    assert all(font_spec(f).name == FONT_NAME for f in FontId)
    assert all(font_spec(f).thick == 4 for f in FontId)


def test_load_creates_one_handle_per_font():
    backend = FakeBackend()
    registry = FontRegistry()
    registry.load(backend)
    assert backend.added == list(FONT_PATHS)
    assert len(backend.created) == len(FontId)
    handles = [registry.handle(f) for f in FontId]
    assert len(set(handles)) == len(FontId)
    for font_id, created in zip(FontId, backend.created):
        spec = font_spec(font_id)
        assert created == (spec.name, spec.size, spec.thick, spec.type)


def test_load_failure_raises():
    backend = FakeBackend(add_ok=False)
    registry = FontRegistry()
    with pytest.raises(FontLoadError):
        registry.load(backend)
    assert backend.created == []


def test_handle_before_load_raises():
    with pytest.raises(KeyError):
        FontRegistry().handle(FontId.SIZE55_4)


def test_unload_deletes_all_handles():
    backend = FakeBackend()
    registry = FontRegistry()
    registry.load(backend)
    handles = sorted(registry.handle(f) for f in FontId)
    registry.unload(backend)
    assert sorted(backend.deleted) == handles
    assert backend.removed == list(FONT_PATHS)
    with pytest.raises(KeyError):
        registry.handle(FontId.SIZE100_4)


def test_unload_failure_raises_after_cleanup():
    backend = FakeBackend(remove_ok=False)
    registry = FontRegistry()
    registry.load(backend)
    with pytest.raises(FontLoadError):
        registry.unload(backend)
    assert len(backend.deleted) == len(FontId)