from __future__ import annotations

from setuptools import setup  # type: ignore

# Metadata lives in pyproject.toml; this shim keeps legacy `setup.py develop` working.
setup()
