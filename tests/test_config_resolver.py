"""Tests for ConfigResolver."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from meta_sync.application.config_properties import (
    META_SYNC_TABLE_NAME,
    ConfigProperty,
)
from meta_sync.application.config_resolver import ConfigResolver, split_list_value
from meta_sync.domain.errors import ConfigurationError, InferenceCycleError
from tests.builders import PropertiesBuilder


class CountingInference:
    """Inference function that records how often it runs."""

    def __init__(self, value):
        self.value = value
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self, cfg):
        with self._lock:
            self.calls += 1
        return self.value


class TestConfigResolverPrecedence:
    """Tests for raw > inferred > default precedence."""

    def test_raw_value_wins_over_inferred_value(self):
        """Test that sync.table is never overridden by the write table name."""
        properties = (
            PropertiesBuilder().with_sync_table("explicit").with_write_table_name("written").build()
        )
        resolver = ConfigResolver(properties)

        assert resolver.resolve(META_SYNC_TABLE_NAME) == "explicit"

    def test_raw_value_skips_inference_entirely(self):
        """Test that inference does not run when a raw value is present."""
        infer = CountingInference("inferred")
        prop = ConfigProperty(key="a", default_value="default", infer_function=infer)
        resolver = ConfigResolver({"a": "raw"}, catalog=[prop])

        assert resolver.resolve("a") == "raw"
        assert infer.calls == 0

    def test_inferred_value_wins_over_default(self):
        """Test that an inferred value replaces the default."""
        properties = PropertiesBuilder().with_write_table_name("written").build()
        resolver = ConfigResolver(properties)

        assert resolver.resolve("sync.table") == "written"

    def test_write_table_name_preferred_over_table_name(self):
        """Test the order of table name inference sources."""
        properties = (
            PropertiesBuilder().with_table_name("table").with_write_table_name("written").build()
        )

        assert ConfigResolver(properties).resolve("sync.table") == "written"

    def test_table_name_used_when_no_write_table_name(self):
        """Test fallback to the table name."""
        properties = PropertiesBuilder().with_table_name("table").build()

        assert ConfigResolver(properties).resolve("sync.table") == "table"

    def test_default_used_when_inference_returns_none(self):
        """Test that the default applies when nothing can be inferred."""
        assert ConfigResolver({}).resolve("sync.table") == "unknown"

    def test_property_without_default_resolves_to_none(self):
        """Test that a missing property with no default resolves to None."""
        assert ConfigResolver({}).resolve("sync.base_path") is None

    def test_inference_can_read_other_resolved_properties(self):
        """Test that inference resolves its dependencies on demand."""
        base = ConfigProperty(key="base", default_value="x")
        derived = ConfigProperty(
            key="derived", infer_function=lambda cfg: cfg.resolve("base") + "-derived"
        )
        resolver = ConfigResolver({"base": "raw"}, catalog=[derived, base])

        assert resolver.resolve("derived") == "raw-derived"


class TestConfigResolverMemoization:
    """Tests for memoized resolution."""

    def test_repeated_resolution_returns_identical_value(self):
        """Test that a key resolves to the same object every time."""
        infer = CountingInference("value")
        prop = ConfigProperty(key="a", infer_function=infer)
        resolver = ConfigResolver({}, catalog=[prop])

        first = resolver.resolve("a")
        second = resolver.resolve(prop)

        assert first is second
        assert infer.calls == 1

    def test_inference_runs_once_under_concurrent_access(self):
        """Test at-most-once inference with many concurrent callers."""
        infer = CountingInference("value")
        prop = ConfigProperty(key="a", infer_function=infer)
        resolver = ConfigResolver({}, catalog=[prop])

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: resolver.resolve("a"), range(64)))

        assert set(results) == {"value"}
        assert infer.calls == 1

    def test_none_inference_result_is_memoized(self):
        """Test that an inference returning None also runs only once."""
        infer = CountingInference(None)
        prop = ConfigProperty(key="a", default_value="d", infer_function=infer)
        resolver = ConfigResolver({}, catalog=[prop])

        assert resolver.resolve("a") == "d"
        assert resolver.resolve("a") == "d"
        assert infer.calls == 1

    def test_raw_properties_are_read_only(self):
        """Test that the resolver does not see later changes to the input bag."""
        properties = {"sync.database": "sales"}
        resolver = ConfigResolver(properties)
        properties["sync.database"] = "changed"

        assert resolver.resolve("sync.database") == "sales"
        with pytest.raises(TypeError):
            resolver.raw_properties["sync.database"] = "x"  # type: ignore[index]


class TestConfigResolverCycles:
    """Tests for inference cycle detection."""

    def test_self_referencing_inference_raises_cycle_error(self):
        """Test that inference re-entering its own key fails fast."""
        prop = ConfigProperty(key="a", default_value="d", infer_function=lambda cfg: cfg.resolve("a"))
        resolver = ConfigResolver({}, catalog=[prop])

        with pytest.raises(InferenceCycleError) as exc_info:
            resolver.resolve("a")

        assert exc_info.value.key == "a"

    def test_mutual_inference_raises_cycle_error_with_chain(self):
        """Test that a two-key cycle reports the resolution chain."""
        a = ConfigProperty(key="a", infer_function=lambda cfg: cfg.resolve("b"))
        b = ConfigProperty(key="b", infer_function=lambda cfg: cfg.resolve("a"))
        resolver = ConfigResolver({}, catalog=[a, b])

        with pytest.raises(InferenceCycleError, match="a -> b -> a"):
            resolver.resolve("a")

    def test_cycle_error_does_not_memoize_a_fallback(self):
        """Test that a failed resolution is not silently replaced by the default."""
        prop = ConfigProperty(key="a", default_value="d", infer_function=lambda cfg: cfg.resolve("a"))
        resolver = ConfigResolver({}, catalog=[prop])

        for _ in range(2):
            with pytest.raises(InferenceCycleError):
                resolver.resolve("a")


class TestConfigResolverTypedAccess:
    """Tests for typed accessors."""

    def test_unknown_key_raises_configuration_error(self):
        """Test that keys outside the catalog are rejected."""
        with pytest.raises(ConfigurationError, match="Unknown config property: nope"):
            ConfigResolver({}).resolve("nope")

    @pytest.mark.parametrize("raw,expected", [("true", True), ("TRUE", True), ("False", False)])
    def test_get_boolean_parses_case_insensitively(self, raw, expected):
        """Test boolean parsing."""
        resolver = ConfigResolver({"sync.enabled": raw})

        assert resolver.get_boolean("sync.enabled") is expected

    def test_get_boolean_rejects_invalid_value(self):
        """Test that an invalid boolean carries key and raw value."""
        resolver = ConfigResolver({"sync.enabled": "yes"})

        with pytest.raises(ConfigurationError) as exc_info:
            resolver.get_boolean("sync.enabled")

        assert exc_info.value.key == "sync.enabled"
        assert exc_info.value.raw_value == "yes"

    def test_get_required_string_raises_when_missing(self):
        """Test that a missing required property fails with its key."""
        with pytest.raises(ConfigurationError, match="sync.base_path"):
            ConfigResolver({}).get_required_string("sync.base_path")

    def test_get_list_splits_and_trims(self):
        """Test comma-separated list parsing."""
        resolver = ConfigResolver({"sync.partition_fields": " region , city ,"})

        assert resolver.get_list("sync.partition_fields") == ["region", "city"]

    def test_split_list_value_handles_empty_values(self):
        """Test that empty and None values give an empty list."""
        assert split_list_value("") == []
        assert split_list_value(None) == []

    def test_resolve_all_returns_every_catalog_key(self):
        """Test that resolve_all covers the whole catalog."""
        resolved = ConfigResolver(PropertiesBuilder().build()).resolve_all()

        assert resolved["sync.database"] == "default"
        assert resolved["sync.base_path"] == "s3://bucket/warehouse/orders"
        assert len(resolved) == 9
