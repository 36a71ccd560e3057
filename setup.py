#!/usr/bin/env python3
"""
Setup script for SeedFuzz

Provides package installation and the seedfuzz console script.
"""

from setuptools import setup, find_packages

setup(
    name="SeedFuzz",
    version="1.0.0",
    description="Class-based seed-mutation fuzzing framework for string inputs",
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    packages=find_packages(include=["seedfuzz", "seedfuzz.*"]),
    entry_points={
        "console_scripts": [
            "seedfuzz=seedfuzz.cli:main",
        ],
    },
)
