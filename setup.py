"""
Setup script for the sfx-hooks package
Enables editable installation: pip install -e .
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="sfx-hooks",
    version="1.0.0",
    description="Random per-event sound effects for console host lifecycle events",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="SFX Hooks Team",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    py_modules=["config"],
    install_requires=[
        # Default earcon synthesis (sfx.audio_file_utils)
        "numpy>=1.26.4",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-timeout>=2.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sfx-hooks=sfx.cli:main",
        ],
    },
)
