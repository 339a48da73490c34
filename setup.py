# setup.py
from setuptools import setup, find_packages

setup(
    name="csvpack",
    version="0.1.0",
    description="Typed CSV export/import bundled in ZIP archives",
    packages=find_packages(
        exclude=(
            "tests",
            "tests.*",
            "docs",
            "build",
            "dist",
        )
    ),
    install_requires=[
        "pandas>=1.5",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "csvpack=csvpack.__main__:main",
        ],
    },
    python_requires=">=3.10",
)
