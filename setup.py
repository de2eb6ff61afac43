from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="pypion",
    version="0.1.0",
    description="Photo-pion production of cosmic-ray nucleons and nuclei on background photon fields",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"pypion": ["data/*.txt"]},
    install_requires=["numpy"],
    extras_require={
        "numba": ["numba"],
        "plot": ["matplotlib"],
        "test": ["pytest"],
    },
    entry_points={"console_scripts": ["pypion=pypion.cli:main"]},
)
