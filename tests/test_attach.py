"""Tests for perch.segments.attach — config and generator attachment."""

import types
from types import SimpleNamespace

import pytest

from perch.errors import SegmentConfigError
from perch.segments.attach import attach, module_exports
from perch.segments.config import SegmentConfig
from perch.segments.types import Segment

ROUTE = "/blog/[slug]"


def _generate_static_params() -> list[dict[str, str]]:
    return [{"slug": "hello"}]


class TestModuleExports:
    def test_module(self) -> None:
        module = types.ModuleType("page")
        module.revalidate = 60  # type: ignore[attr-defined]
        exports = module_exports(module)
        assert exports is not None
        assert exports["revalidate"] == 60

    def test_mapping_passthrough(self) -> None:
        exports = {"runtime": "edge"}
        assert module_exports(exports) is exports

    @pytest.mark.parametrize("value", [None, "page", b"page", 42, 1.5, True])
    def test_primitives(self, value: object) -> None:
        assert module_exports(value) is None


class TestAttach:
    def test_sets_config(self) -> None:
        segment = Segment(name="[slug]")
        attach(segment, SimpleNamespace(revalidate=60), ROUTE)
        assert segment.config == SegmentConfig(revalidate=60)

    def test_no_recognized_keys_leaves_config_unset(self) -> None:
        segment = Segment(name="blog")
        attach(segment, SimpleNamespace(title="Blog"), ROUTE)
        assert segment.config is None

    def test_binds_generator(self) -> None:
        segment = Segment(name="[slug]")
        attach(segment, SimpleNamespace(generate_static_params=_generate_static_params), ROUTE)
        assert segment.generate_static_params is _generate_static_params
        assert segment.config is None

    def test_non_callable_generator_ignored(self) -> None:
        segment = Segment(name="[slug]")
        attach(segment, SimpleNamespace(generate_static_params=[{"slug": "a"}]), ROUTE)
        assert segment.generate_static_params is None

    @pytest.mark.parametrize("userland", [None, "page", 0, False])
    def test_unstructured_module_is_noop(self, userland: object) -> None:
        segment = Segment(name="[slug]")
        attach(segment, userland, ROUTE)
        assert segment.config is None
        assert segment.generate_static_params is None

    def test_mapping_module(self) -> None:
        segment = Segment(name="[slug]")
        attach(segment, {"dynamic": "force-dynamic"}, ROUTE)
        assert segment.config == SegmentConfig(dynamic="force-dynamic")

    def test_generator_with_nodejs_runtime(self) -> None:
        segment = Segment(name="[slug]")
        userland = SimpleNamespace(runtime="nodejs", generate_static_params=_generate_static_params)
        attach(segment, userland, ROUTE)
        assert segment.config == SegmentConfig(runtime="nodejs")
        assert segment.generate_static_params is _generate_static_params


class TestAttachErrors:
    def test_generator_with_edge_runtime(self) -> None:
        segment = Segment(name="[slug]")
        userland = SimpleNamespace(runtime="edge", generate_static_params=_generate_static_params)

        with pytest.raises(SegmentConfigError, match="edge runtime") as exc_info:
            attach(segment, userland, ROUTE)

        assert exc_info.value.route == ROUTE
        assert ROUTE in str(exc_info.value)

    def test_generator_with_experimental_edge_runtime(self) -> None:
        segment = Segment(name="[slug]")
        userland = {"runtime": "experimental-edge", "generate_static_params": _generate_static_params}

        with pytest.raises(SegmentConfigError, match="edge runtime"):
            attach(segment, userland, ROUTE)

    def test_edge_runtime_without_generator(self) -> None:
        segment = Segment(name="[slug]")
        attach(segment, SimpleNamespace(runtime="edge"), ROUTE)
        assert segment.config == SegmentConfig(runtime="edge")

    def test_invalid_value_propagates(self) -> None:
        segment = Segment(name="[slug]")
        with pytest.raises(SegmentConfigError, match="'revalidate'"):
            attach(segment, SimpleNamespace(revalidate="often"), ROUTE)
        assert segment.config is None
