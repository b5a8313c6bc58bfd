#!/usr/bin/env python3
"""
KV-Repo Setup Script
====================
Allows installation of the kv-repo package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # Development install with test tools
"""

from setuptools import setup, find_packages

setup(
    name="kv-repo",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "kvrepo=kvrepo.main:main",
        ],
    },
)
