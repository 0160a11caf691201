# setup.py
from setuptools import setup, find_packages

setup(
    name="schemelet",
    version="0.1.0",
    description="A tree-walking evaluator for a small Scheme subset",
    packages=find_packages(include=["schemelet", "schemelet.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["schemelet=schemelet.repl:main"],
    },
    zip_safe=False,
)
