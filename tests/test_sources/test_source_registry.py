"""Tests for RandomSourceRegistry."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from weighted_select.sources.base import RandomSource
from weighted_select.sources.numpy_source import NumpyRandomSource
from weighted_select.sources.registry import PLUGIN_GROUP, RandomSourceRegistry
from weighted_select.sources.system import SystemRandomSource


class _ConstantSource(RandomSource):
    """Unseedable source that always draws zero."""

    @property
    def name(self) -> str:
        return "constant"

    def random(self) -> float:
        return 0.0


def _plugin(name: str, load: MagicMock | type | Exception) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    ep.value = f"plugin_pkg.sources:{name}"
    if isinstance(load, Exception):
        ep.load.side_effect = load
    else:
        ep.load.return_value = load
    return ep


@pytest.fixture(autouse=True)
def _restore_registry() -> Iterator[None]:
    saved_sources = dict(RandomSourceRegistry._sources)
    saved_scanned = RandomSourceRegistry._plugins_scanned
    yield
    RandomSourceRegistry._sources = saved_sources
    RandomSourceRegistry._plugins_scanned = saved_scanned


class TestBuild:
    """build() turns a config name and seed into a source."""

    def test_seedable_source_receives_seed(self) -> None:
        a = RandomSourceRegistry.build("numpy", seed=5)
        b = RandomSourceRegistry.build("numpy", seed=5)
        assert isinstance(a, NumpyRandomSource)
        assert a is not b
        assert [a.random() for _ in range(3)] == [b.random() for _ in range(3)]

    def test_unseedable_source_built_without_seed(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="weighted_select"):
            source = RandomSourceRegistry.build("system", seed=5)
        assert isinstance(source, SystemRandomSource)
        assert "takes no seed" in caplog.text

    def test_custom_unseedable_source(self) -> None:
        RandomSourceRegistry.register("constant")(_ConstantSource)
        source = RandomSourceRegistry.build("constant")
        assert isinstance(source, _ConstantSource)
        assert source.uniform(0.0, 4.0) == 0.0

    def test_unknown_name_raises_key_error(self) -> None:
        RandomSourceRegistry._plugins_scanned = True
        with pytest.raises(KeyError, match="no_such_source"):
            RandomSourceRegistry.build("no_such_source")


class TestLookup:
    """Registration, get() and list_available()."""

    def test_builtins_registered(self) -> None:
        assert RandomSourceRegistry.get("numpy") is NumpyRandomSource
        assert RandomSourceRegistry.get("system") is SystemRandomSource

    def test_decorator_returns_class(self) -> None:
        @RandomSourceRegistry.register("constant")
        class Decorated(_ConstantSource):
            pass

        assert RandomSourceRegistry.get("constant") is Decorated

    def test_later_registration_wins(self) -> None:
        class Other(_ConstantSource):
            pass

        RandomSourceRegistry.register("constant")(_ConstantSource)
        RandomSourceRegistry.register("constant")(Other)
        assert RandomSourceRegistry.get("constant") is Other

    def test_unknown_name_lists_known_names(self) -> None:
        RandomSourceRegistry._plugins_scanned = True
        with pytest.raises(KeyError, match="numpy"):
            RandomSourceRegistry.get("no_such_source")

    def test_list_available_is_sorted(self) -> None:
        RandomSourceRegistry.register("zzz_source")(_ConstantSource)
        RandomSourceRegistry.register("aaa_source")(_ConstantSource)
        available = RandomSourceRegistry.list_available()
        assert available == sorted(available)
        assert {"numpy", "system", "zzz_source", "aaa_source"} <= set(available)

    def test_reset_forgets_everything(self) -> None:
        RandomSourceRegistry.register("constant")(_ConstantSource)
        RandomSourceRegistry._plugins_scanned = True
        RandomSourceRegistry._reset()
        assert RandomSourceRegistry._sources == {}
        assert RandomSourceRegistry._plugins_scanned is False


class TestPlugins:
    """Sources contributed through the entry-point group."""

    def test_plugin_found_on_first_miss(self) -> None:
        RandomSourceRegistry._plugins_scanned = False
        ep = _plugin("plugin_source", _ConstantSource)

        with patch("importlib.metadata.entry_points", return_value=[ep]) as eps:
            assert RandomSourceRegistry.get("plugin_source") is _ConstantSource

        eps.assert_called_once_with(group=PLUGIN_GROUP)
        ep.load.assert_called_once()

    def test_plugin_can_be_built(self) -> None:
        RandomSourceRegistry._plugins_scanned = False
        with patch(
            "importlib.metadata.entry_points",
            return_value=[_plugin("plugin_source", _ConstantSource)],
        ):
            source = RandomSourceRegistry.build("plugin_source", seed=3)
        assert isinstance(source, _ConstantSource)

    def test_registered_name_beats_plugin(self) -> None:
        RandomSourceRegistry._plugins_scanned = False
        ep = _plugin("numpy", _ConstantSource)

        with patch("importlib.metadata.entry_points", return_value=[ep]):
            RandomSourceRegistry.list_available()

        assert RandomSourceRegistry.get("numpy") is NumpyRandomSource
        ep.load.assert_not_called()

    def test_broken_plugin_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        RandomSourceRegistry._plugins_scanned = False
        broken = _plugin("broken_source", ImportError("module not found"))
        working = _plugin("working_source", _ConstantSource)

        with (
            caplog.at_level(logging.WARNING, logger="weighted_select"),
            patch("importlib.metadata.entry_points", return_value=[broken, working]),
        ):
            available = RandomSourceRegistry.list_available()

        assert "broken_source" not in available
        assert "working_source" in available
        assert "broken_source" in caplog.text

    def test_unreadable_metadata_does_not_raise(self) -> None:
        RandomSourceRegistry._plugins_scanned = False
        with patch("importlib.metadata.entry_points", side_effect=RuntimeError("bad metadata")):
            available = RandomSourceRegistry.list_available()
        assert {"numpy", "system"} <= set(available)

    def test_plugins_scanned_once(self) -> None:
        RandomSourceRegistry._plugins_scanned = False
        with patch("importlib.metadata.entry_points", return_value=[]) as eps:
            RandomSourceRegistry.list_available()
            RandomSourceRegistry.list_available()
            with pytest.raises(KeyError):
                RandomSourceRegistry.get("no_such_source")
        eps.assert_called_once()
