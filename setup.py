"""
Setup script for statescan
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
readme_file = Path(__file__).parent / "README.md"
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")
else:
    long_description = "Decode and search bit-packed fields in fixed-length binary state records"

setup(
    name="statescan",
    version="0.1",
    description="Decode and search bit-packed fields in fixed-length binary state records",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["statescan", "statescan.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20",
        "pandas>=1.3",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
            "ruff>=0.8.0",
            "mypy>=1.13",
        ],
    },
    entry_points={
        "console_scripts": [
            "statescan=statescan.cli.main:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
