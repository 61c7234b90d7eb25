"""
bladeinspector - setup.py
-------------------------
Installs the bladeinspector packages and provides the CLI entry point.

Usage:
    pip install -e .
    pip install -e .[dev]      # with test tooling
    bladeinspector --help
"""
from setuptools import setup, find_packages

setup(
    name="bladeinspector",
    version="0.1.0",
    description="Wind turbine blade defect classification and calibration",
    author="bladeinspector",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv",
        "numpy",
        "pandas",
        "pyarrow",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "bladeinspector=bladeinspector.cli:main",
        ],
    },
)
