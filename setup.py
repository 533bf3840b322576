from setuptools import setup, find_packages

setup(
    name="oboBridge",
    version="0.1.0",
    description="Compact OBO identifier <-> IRI codec and anonymous node ids",
    packages=find_packages(include=["oboBridge", "oboBridge.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "rdflib>=6.0",
        "PyYAML>=6.0",
        "curies>=0.7",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["oboBridge=oboBridge.cli.__main__:main"],
    },
    license="MIT",
)
