# setup.py
from setuptools import setup, find_packages

setup(
    name="asdb-taxa",
    version="0.1.0",
    description="Taxon lineage cache for the antiSMASH database, built from NCBI taxonomy dumps",
    author="asdb-taxa Contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "asdb-taxa=asdb_taxa.cli:main",
        ],
    },
    install_requires=[
        "pandas>=1.1",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.7",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
    ],
)
