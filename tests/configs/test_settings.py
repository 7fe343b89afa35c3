"""Tests for configuration settings."""

import pytest
from pydantic import ValidationError

from recipe_search.configs.cosmos import CosmosSettings
from recipe_search.configs.settings import Settings, get_settings
from recipe_search.configs.vector_store import VectorStoreSettings
from recipe_search.core.vector_policy import DistanceFunction, ScoreOrder, VectorDataType, VectorIndexType


class TestVectorStoreSettings:
    """Tests for VectorStoreSettings."""

    def test_defaults(self) -> None:
        settings = VectorStoreSettings()

        assert settings.embedding_path == "/embedding"
        assert settings.data_type is VectorDataType.FLOAT32
        assert settings.dimensions == 8
        assert settings.distance_function is DistanceFunction.COSINE
        assert settings.index_type is VectorIndexType.DISK_ANN
        assert settings.included_paths == ["/name/?", "/description/?"]
        assert settings.excluded_paths == ["/*"]
        assert settings.top_k == 3

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("VECTOR_STORE_DIMENSIONS", "1536")
        monkeypatch.setenv("VECTOR_STORE_DISTANCE_FUNCTION", "euclidean")

        settings = VectorStoreSettings()

        assert settings.dimensions == 1536
        assert settings.distance_function is DistanceFunction.EUCLIDEAN

    def test_rejects_unknown_distance_function(self) -> None:
        with pytest.raises(ValidationError):
            VectorStoreSettings(distance_function="manhattan")

    def test_rejects_zero_dimensions(self) -> None:
        with pytest.raises(ValidationError):
            VectorStoreSettings(dimensions=0)


class TestCosmosSettings:
    """Tests for CosmosSettings."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("COSMOS_KEY", raising=False)

        settings = CosmosSettings()

        assert settings.consistency_level == "Eventual"
        assert settings.throughput == 400
        assert settings.key is None

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("COSMOS_ENDPOINT", "https://acct.documents.azure.com:443/")
        monkeypatch.setenv("COSMOS_KEY", "secret")
        monkeypatch.setenv("COSMOS_CONTAINER_NAME", "dishes")

        settings = CosmosSettings()

        assert settings.endpoint == "https://acct.documents.azure.com:443/"
        assert settings.key == "secret"
        assert settings.container_name == "dishes"

    def test_rejects_throughput_below_minimum(self) -> None:
        with pytest.raises(ValidationError):
            CosmosSettings(throughput=100)


class TestSettings:
    """Tests for the aggregated settings."""

    def test_aggregates_sections(self) -> None:
        settings = Settings()

        assert isinstance(settings.cosmos, CosmosSettings)
        assert isinstance(settings.vector_store, VectorStoreSettings)
        assert settings.log_level == "INFO"

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()

        assert get_settings() is get_settings()


class TestScoreOrder:
    """Tests for the distance function to sort direction mapping."""

    @pytest.mark.parametrize(
        ("function", "order"),
        [
            (DistanceFunction.COSINE, ScoreOrder.HIGHER_IS_BETTER),
            (DistanceFunction.DOT_PRODUCT, ScoreOrder.HIGHER_IS_BETTER),
            (DistanceFunction.EUCLIDEAN, ScoreOrder.LOWER_IS_BETTER),
        ],
    )
    def test_score_order(self, function: DistanceFunction, order: ScoreOrder) -> None:
        assert function.score_order is order


class TestBaseSettings:
    """Tests for shared settings."""

    def test_log_level_is_normalized(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")
