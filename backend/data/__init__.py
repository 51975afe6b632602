"""Sample data and fixtures."""

from data.sample_building import create_sample_building

__all__ = ["create_sample_building"]
