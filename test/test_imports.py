#!/usr/bin/env python3
"""
Tests for import functionality.
"""

import pytest
import sys
from pathlib import Path

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def test_models_imports():
    """Test that models can be imported correctly."""
    try:
        from gene_insert_sites.models.features import (
            FeatureKind,
            GenomicFeature,
            CDSInterval,
            StatisticsRow,
            OutputReport,
            RunSummary
        )
        assert FeatureKind is not None
        assert GenomicFeature is not None
        assert CDSInterval is not None
        assert StatisticsRow is not None
        assert OutputReport is not None
        assert RunSummary is not None
    except ImportError as e:
        pytest.fail(f"Failed to import feature models: {e}")


def test_config_imports():
    """Test that config can be imported correctly."""
    try:
        from gene_insert_sites.config.settings import InsertSitesConfig
        assert InsertSitesConfig is not None
    except ImportError as e:
        pytest.fail(f"Failed to import InsertSitesConfig: {e}")


def test_core_imports():
    """Test that core modules can be imported correctly."""
    try:
        from gene_insert_sites.core import (
            pipeline,
            annotation,
            feature_catalog,
            metadata,
            output,
            plot_loader,
            statistics
        )
        assert pipeline is not None
        assert annotation is not None
        assert feature_catalog is not None
        assert metadata is not None
        assert output is not None
        assert plot_loader is not None
        assert statistics is not None
    except ImportError as e:
        pytest.fail(f"Failed to import core modules: {e}")


def test_utils_imports():
    """Test that utils can be imported correctly."""
    try:
        from gene_insert_sites.utils import (
            setup_logging,
            PipelineLogger,
            log_file_operation,
            log_error
        )
        assert setup_logging is not None
        assert PipelineLogger is not None
        assert log_file_operation is not None
        assert log_error is not None
    except ImportError as e:
        pytest.fail(f"Failed to import utils: {e}")


def test_lazy_getters():
    """Test the package level lazy getters."""
    import gene_insert_sites

    assert gene_insert_sites.get_pipeline().__name__ == "InsertSitesPipeline"
    assert gene_insert_sites.get_config().__name__ == "InsertSitesConfig"
    assert gene_insert_sites.get_statistics_row().__name__ == "StatisticsRow"


def test_cli_imports():
    """Test that CLI can be imported correctly."""
    try:
        from gene_insert_sites.cli import main
        assert main is not None
    except ImportError as e:
        pytest.fail(f"Failed to import CLI: {e}")
