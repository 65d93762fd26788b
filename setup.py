from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _read_version() -> str:
    """Read ``__version__`` from the package without importing it."""

    init = ROOT / "src" / "stationreg" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip('"').strip("'")
    raise RuntimeError("Unable to find __version__ in src/stationreg/__init__.py")


setup(
    name="stationreg",
    version=_read_version(),
    description="Thread-safe registry of capacity-weighted assembly stations",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "stationreg=stationreg.__main__:main",
        ],
    },
)
